# src/pricing/quote.py
"""
Fee calculation and quote output object.

Provides:
- fixed refund rate lookup per insurance product
- annual fee + refund computation
- QuoteResult output object

Notes:
- Monetary outputs are truncated toward zero, never rounded.
- The refund is computed from the *unrounded* annual fee, not from the
  truncated annual_fee. Both amounts must keep this order to reproduce
  existing quotes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

import numpy as np

from src.codes.insurance_type import InsuranceType
from src.pricing.config import PricingConfig
from src.pricing.errors import UnknownInsuranceType


@dataclass(frozen=True)
class QuoteResult:
    annual_fee: int
    age_adjustment_rate: float
    age: int
    refund_amount: int

    @property
    def net_annual_fee(self) -> int:
        return self.annual_fee - self.refund_amount

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def truncate(value: float) -> int:
    """Drop the fractional part (toward zero)."""
    return int(np.trunc(value))


def fixed_refund_rate(
    insurance_type: Union[int, InsuranceType],
    cfg: Optional[PricingConfig] = None,
) -> float:
    """
    Refund rate for a product.

    Raises UnknownInsuranceType for codes outside the refund table; there is
    no default rate.
    """
    cfg = cfg or PricingConfig()
    if isinstance(insurance_type, InsuranceType):
        it = insurance_type
    else:
        it = InsuranceType.from_code(insurance_type)
    if it is None or it not in cfg.refund_rates:
        raise UnknownInsuranceType(insurance_type)
    return float(cfg.refund_rates[it])


def compute_quote(
    insurance_type: Union[int, InsuranceType],
    monthly_fee: int,
    age_adjustment_rate: float,
    age: int,
    cfg: Optional[PricingConfig] = None,
) -> QuoteResult:
    """
    annual (unrounded) = monthly_fee * 12 * age_adjustment_rate
    annual_fee         = trunc(annual)
    refund_amount      = trunc(annual * refund_rate)
    """
    cfg = cfg or PricingConfig()

    annual_unrounded = monthly_fee * cfg.months_per_year * float(age_adjustment_rate)
    annual_fee = truncate(annual_unrounded)

    refund_rate = fixed_refund_rate(insurance_type, cfg)
    refund_amount = truncate(annual_unrounded * refund_rate)

    return QuoteResult(
        annual_fee=annual_fee,
        age_adjustment_rate=float(age_adjustment_rate),
        age=int(age),
        refund_amount=refund_amount,
    )
