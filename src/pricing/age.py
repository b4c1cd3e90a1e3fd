# src/pricing/age.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from src.pricing.errors import InvalidDateRange


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


def age_in_years(birth_date: date, reference_date: Optional[date] = None) -> int:
    """
    Whole years elapsed between birth_date and reference_date (default: today).

    A birthday not yet reached in the reference year does not count.
    Someone born on 29 Feb turns a year older on 1 Mar in non-leap years.
    """
    birth = _as_date(birth_date)
    ref = _as_date(reference_date) if reference_date is not None else date.today()

    if birth > ref:
        raise InvalidDateRange(birth, ref)

    years = ref.year - birth.year
    if (ref.month, ref.day) < (birth.month, birth.day):
        years -= 1
    return years
