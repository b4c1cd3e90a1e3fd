"""
Lightweight in-memory estimate store for tests and local runs.

Provides the same interface as SqlEstimateStore so the estimate service can
run without a database. It is NOT intended for production use.
"""

from __future__ import annotations

import threading
import uuid
from typing import Dict, Iterable, List, Optional

from src.estimate.schemas import InsuranceOrder
from src.pricing.errors import RateNotFound
from src.storage.base import AgeBracket, InsuranceTypeRecord


class InMemoryEstimateStore:
    def __init__(
        self,
        insurance_types: Iterable[InsuranceTypeRecord] = (),
        age_brackets: Iterable[AgeBracket] = (),
    ) -> None:
        self._lock = threading.Lock()
        self._types: Dict[int, InsuranceTypeRecord] = {t.code: t for t in insurance_types}
        self._brackets: List[AgeBracket] = sorted(age_brackets, key=lambda b: b.min_age)
        self.orders: Dict[str, InsuranceOrder] = {}

    def all_insurance_types(self) -> List[InsuranceTypeRecord]:
        return [self._types[c] for c in sorted(self._types)]

    def find_insurance_name(self, code: int) -> Optional[str]:
        rec = self._types.get(code)
        return rec.name if rec else None

    def monthly_fee(self, code: int) -> int:
        rec = self._types.get(code)
        if rec is None:
            raise RateNotFound(f"No monthly fee for insurance type {code}")
        return rec.monthly_fee

    def upsert_insurance_types(self, records: Iterable[InsuranceTypeRecord]) -> int:
        records = list(records)
        with self._lock:
            for rec in records:
                self._types[rec.code] = rec
        return len(records)

    def age_adjustment_rate(self, age: int) -> float:
        for b in self._brackets:
            if b.contains(age):
                return float(b.rate)
        raise RateNotFound(f"No age adjustment rate for age {age}")

    def replace_age_brackets(self, brackets: Iterable[AgeBracket]) -> int:
        new = sorted(brackets, key=lambda b: b.min_age)
        with self._lock:
            self._brackets = new
        return len(new)

    def insert_order(self, order: InsuranceOrder) -> str:
        order_id = str(uuid.uuid4())
        with self._lock:
            self.orders[order_id] = order
        return order_id

    def get_order(self, order_id: str) -> Optional[InsuranceOrder]:
        return self.orders.get(order_id)

    def count_orders(self) -> int:
        return len(self.orders)
