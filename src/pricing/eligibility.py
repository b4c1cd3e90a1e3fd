# src/pricing/eligibility.py
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from src.pricing.age import age_in_years
from src.pricing.config import PricingConfig
from src.pricing.errors import InvalidDateRange

logger = logging.getLogger(__name__)


def is_eligible(
    birth_date: date,
    today: Optional[date] = None,
    cfg: Optional[PricingConfig] = None,
) -> bool:
    """
    True if the applicant's age is within [cfg.min_age, cfg.max_age].

    Pure predicate: rejecting the request is the caller's job. A birth date
    in the future is treated as ineligible rather than raised.
    """
    cfg = cfg or PricingConfig()
    try:
        age = age_in_years(birth_date, today)
    except InvalidDateRange as e:
        logger.debug("Ineligible: %s", e)
        return False
    return cfg.min_age <= age <= cfg.max_age
