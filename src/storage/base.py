# src/storage/base.py
"""
Storage interface the estimate engine depends on.

Implemented by:
- src.storage.sql_store.SqlEstimateStore   (SQLAlchemy, production)
- src.storage.memory.InMemoryEstimateStore (tests / local runs)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.estimate.schemas import InsuranceOrder


@dataclass(frozen=True)
class InsuranceTypeRecord:
    code: int
    name: str
    monthly_fee: int


@dataclass(frozen=True)
class AgeBracket:
    min_age: int
    max_age: int
    rate: float

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


@runtime_checkable
class EstimateStore(Protocol):
    def all_insurance_types(self) -> list[InsuranceTypeRecord]:
        ...

    def find_insurance_name(self, code: int) -> Optional[str]:
        ...

    def monthly_fee(self, code: int) -> int:
        """Raises RateNotFound for an unknown product code."""
        ...

    def age_adjustment_rate(self, age: int) -> float:
        """Raises RateNotFound if no bracket covers `age`."""
        ...

    def insert_order(self, order: "InsuranceOrder") -> str:
        """Persist the order atomically and return its id."""
        ...
