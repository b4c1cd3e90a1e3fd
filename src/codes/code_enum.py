# src/codes/code_enum.py
"""
Coded categories.

A coded category is a closed set of values, each carrying:
- code : stable integer shown to callers and persisted
- label: display string (opaque, not unique, never used for lookup)

Subclasses declare members as (code, label) tuples:

    class Colour(CodeEnum):
        RED = (1, "Red")
        BLUE = (2, "Blue")
"""

from __future__ import annotations

import re
from enum import Enum, EnumMeta
from typing import Any, Optional, Tuple, TypeVar, Union

T = TypeVar("T", bound="CodeEnum")

_CODE_RE = re.compile(r"-?[0-9]+")


class _CodeEnumMeta(EnumMeta):
    def __new__(mcs, cls_name, bases, classdict, **kwargs):
        cls = super().__new__(mcs, cls_name, bases, classdict, **kwargs)
        seen: dict[int, str] = {}
        for member in cls:
            if member.code in seen:
                raise ValueError(
                    f"{cls_name}: duplicate code {member.code} "
                    f"({seen[member.code]}, {member.name})"
                )
            seen[member.code] = member.name
        return cls


class CodeEnum(Enum, metaclass=_CodeEnumMeta):
    def __init__(self, code: int, label: str) -> None:
        self._code = int(code)
        self._label = label

    @property
    def code(self) -> int:
        return self._code

    @property
    def label(self) -> str:
        return self._label

    def has_code(self, code: Union[int, str, None]) -> bool:
        """True if `code` (int or numeric string) is this member's code."""
        parsed = _parse_code(code)
        return parsed is not None and parsed == self._code

    @classmethod
    def all_variants(cls: type[T]) -> list[T]:
        return list(cls)

    @classmethod
    def from_code(cls: type[T], code: Union[int, str, None]) -> Optional[T]:
        """
        Return the member with the given code, or None if there is none.

        Form inputs arrive as text, so numeric strings are accepted too.
        """
        for member in cls:
            if member.has_code(code):
                return member
        return None

    @classmethod
    def choices(cls) -> list[Tuple[int, str]]:
        return [(m.code, m.label) for m in cls]


def _parse_code(code: Any) -> Optional[int]:
    if code is None or isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str):
        s = code.strip()
        if _CODE_RE.fullmatch(s):
            return int(s)
    return None
