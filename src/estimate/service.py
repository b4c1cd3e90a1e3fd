# src/estimate/service.py
"""
Estimate service for the insurance quote flow.

Single source of truth:
- (insurance type code, date of birth) -> monthly fee + age + age adjustment
- -> fee calculator -> QuoteResult
- accepted order -> store (one transaction)

Eligibility (age band) is a separate gate the caller checks before quote().
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from src.estimate.schemas import InsuranceOrder
from src.pricing.age import age_in_years
from src.pricing.config import PricingConfig
from src.pricing.eligibility import is_eligible
from src.pricing.errors import NotFound
from src.pricing.quote import QuoteResult, compute_quote
from src.storage.base import EstimateStore, InsuranceTypeRecord

logger = logging.getLogger(__name__)


class EstimateService:
    def __init__(self, store: EstimateStore, cfg: Optional[PricingConfig] = None) -> None:
        self.store = store
        self.cfg = cfg or PricingConfig()

    def list_insurance_types(self) -> list[InsuranceTypeRecord]:
        return self.store.all_insurance_types()

    def insurance_type_name(self, insurance_type: int) -> str:
        name = self.store.find_insurance_name(insurance_type)
        if name is None:
            raise NotFound(f"Unknown insurance type: {insurance_type}")
        return name

    def is_age_valid(self, date_of_birth: date, today: Optional[date] = None) -> bool:
        return is_eligible(date_of_birth, today=today, cfg=self.cfg)

    def quote(self, insurance_type: int, date_of_birth: date, today: Optional[date] = None) -> QuoteResult:
        """
        Compute the annual fee and refund for a product and birth date.

        Does not re-check eligibility; out-of-band ages are priced with
        whatever rate the store returns.
        """
        monthly_fee = self.store.monthly_fee(insurance_type)
        age = age_in_years(date_of_birth, today)
        rate = self.store.age_adjustment_rate(age)

        result = compute_quote(insurance_type, monthly_fee, rate, age, cfg=self.cfg)
        logger.debug(
            "Quote insurance_type=%s age=%s monthly_fee=%s rate=%s -> annual_fee=%s refund=%s",
            insurance_type, age, monthly_fee, rate, result.annual_fee, result.refund_amount,
        )
        return result

    def register_order(self, order: InsuranceOrder) -> str:
        """
        Record an accepted order. The store writes it in a single transaction;
        storage errors propagate unchanged.
        """
        order_id = self.store.insert_order(order)
        logger.info("Registered order %s", order_id)
        return order_id


# In-process cache (one service per process, built on first use)
_CACHED_SERVICE: Optional[EstimateService] = None


def get_service(force_reload: bool = False) -> EstimateService:
    """
    Build and cache the default service backed by DATABASE_URL.
    """
    global _CACHED_SERVICE
    if force_reload or _CACHED_SERVICE is None:
        from src.storage.sql_store import SqlEstimateStore
        from src.utils.config import get_database_config

        db = get_database_config()
        _CACHED_SERVICE = EstimateService(SqlEstimateStore(db.url, echo=db.echo))
    return _CACHED_SERVICE
