# src/pricing/errors.py
"""
Errors raised by the estimate engine.

- InvalidDateRange     : birth date after the reference date (caller bug)
- UnknownInsuranceType : refund-rate table miss (data/config error)
- NotFound             : lookup miss the caller may recover from
- RateNotFound         : rate data missing for a code or an age

Storage failures are not wrapped; they propagate from the storage layer as-is.
"""

from __future__ import annotations

from datetime import date
from typing import Any


class EstimateError(Exception):
    pass


class InvalidDateRange(EstimateError, ValueError):
    def __init__(self, birth_date: date, reference_date: date) -> None:
        super().__init__(f"Birth date {birth_date} is after reference date {reference_date}")
        self.birth_date = birth_date
        self.reference_date = reference_date


class UnknownInsuranceType(EstimateError, KeyError):
    def __init__(self, insurance_type: Any) -> None:
        super().__init__(f"Invalid insurance type: {insurance_type}")
        self.insurance_type = insurance_type

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class NotFound(EstimateError, LookupError):
    pass


class RateNotFound(NotFound):
    pass
