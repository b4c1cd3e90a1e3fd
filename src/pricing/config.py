# src/pricing/config.py
"""
Pricing configuration.

Static values used by the estimate engine:
- months_per_year: monthly base fee -> annual fee multiplier
- min_age/max_age: inclusive age band accepted for quoting
- refund_rates: fixed share of the annual premium returned to the customer,
  per product (last year's actuals; not recalculated per year)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from src.codes.insurance_type import InsuranceType


DEFAULT_REFUND_RATES: Mapping[InsuranceType, float] = MappingProxyType(
    {
        InsuranceType.MEDICAL: 0.20,
        InsuranceType.DEATH: 0.15,
        InsuranceType.CANCER: 0.35,
    }
)


@dataclass(frozen=True)
class PricingConfig:
    months_per_year: int = 12

    # Eligibility band (inclusive both ends)
    min_age: int = 20
    max_age: int = 100

    refund_rates: Mapping[InsuranceType, float] = field(default_factory=lambda: DEFAULT_REFUND_RATES)
