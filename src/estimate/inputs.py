# src/estimate/inputs.py
"""
Birth-date input helpers.

Quote forms collect year / month / day separately and submit them joined as
"YYYY/MM/DD" with zero-padded month and day.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

DOB_FORMAT = "%Y/%m/%d"


def _blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and v.strip() == "")


def join_date_of_birth(year: Any, month: Any, day: Any) -> Optional[str]:
    """Join parts into "YYYY/MM/DD". Returns None if any part is missing."""
    if _blank(year) or _blank(month) or _blank(day):
        return None
    return f"{str(year).strip()}/{str(month).strip().zfill(2)}/{str(day).strip().zfill(2)}"


def parse_date_of_birth(value: str) -> date:
    """Parse "YYYY/MM/DD". Invalid calendar dates raise ValueError."""
    return datetime.strptime(value.strip(), DOB_FORMAT).date()


def date_of_birth_from_parts(year: Any, month: Any, day: Any) -> Optional[date]:
    joined = join_date_of_birth(year, month, day)
    return parse_date_of_birth(joined) if joined is not None else None


def format_date_of_birth(d: date) -> str:
    return d.strftime(DOB_FORMAT)
