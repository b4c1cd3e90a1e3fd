"""
SQLAlchemy-backed estimate store.
Implements the same interface as src.storage.memory (in-memory stub).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.estimate.schemas import InsuranceOrder
from src.pricing.errors import RateNotFound
from src.storage.base import AgeBracket, InsuranceTypeRecord
from src.storage.models import AgeAdjustmentRateRow, Base, InsuranceOrderRow, InsuranceTypeRow

logger = logging.getLogger(__name__)

_ORDER_FIELDS = tuple(InsuranceOrder.model_fields)


def _engine_kwargs(connection_string: str, echo: bool) -> dict:
    kwargs: dict = {"echo": echo, "pool_pre_ping": True}
    if connection_string.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives in one connection; share it across sessions
        if connection_string in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(pool_size=5, max_overflow=10)
    return kwargs


class SqlEstimateStore:
    """
    Rate tables and order persistence using SQLAlchemy.
    """

    def __init__(self, connection_string: str, echo: bool = False) -> None:
        connection_string = connection_string.strip()
        self.engine = create_engine(connection_string, **_engine_kwargs(connection_string, echo))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        s = self.SessionLocal()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    # ------------------------------------------------------------------ #
    # Insurance types
    # ------------------------------------------------------------------ #
    def all_insurance_types(self) -> List[InsuranceTypeRecord]:
        with self._session() as s:
            rows = s.scalars(select(InsuranceTypeRow).order_by(InsuranceTypeRow.code)).all()
            return [InsuranceTypeRecord(code=r.code, name=r.name, monthly_fee=r.monthly_fee) for r in rows]

    def find_insurance_name(self, code: int) -> Optional[str]:
        with self._session() as s:
            row = s.get(InsuranceTypeRow, code)
            return row.name if row else None

    def monthly_fee(self, code: int) -> int:
        with self._session() as s:
            row = s.get(InsuranceTypeRow, code)
            if row is None:
                raise RateNotFound(f"No monthly fee for insurance type {code}")
            return int(row.monthly_fee)

    def upsert_insurance_types(self, records: Iterable[InsuranceTypeRecord]) -> int:
        n = 0
        with self._session() as s:
            for rec in records:
                s.merge(InsuranceTypeRow(code=rec.code, name=rec.name, monthly_fee=rec.monthly_fee))
                n += 1
        return n

    # ------------------------------------------------------------------ #
    # Age adjustment
    # ------------------------------------------------------------------ #
    def age_adjustment_rate(self, age: int) -> float:
        with self._session() as s:
            stmt = (
                select(AgeAdjustmentRateRow.rate)
                .where(AgeAdjustmentRateRow.min_age <= age, AgeAdjustmentRateRow.max_age >= age)
                .order_by(AgeAdjustmentRateRow.min_age)
                .limit(1)
            )
            rate = s.scalar(stmt)
            if rate is None:
                raise RateNotFound(f"No age adjustment rate for age {age}")
            return float(rate)

    def replace_age_brackets(self, brackets: Iterable[AgeBracket]) -> int:
        """Swap the whole bracket table in one transaction."""
        n = 0
        with self._session() as s:
            s.execute(delete(AgeAdjustmentRateRow))
            for b in brackets:
                s.add(AgeAdjustmentRateRow(min_age=b.min_age, max_age=b.max_age, rate=b.rate))
                n += 1
        return n

    # ------------------------------------------------------------------ #
    # Orders
    # ------------------------------------------------------------------ #
    def insert_order(self, order: InsuranceOrder) -> str:
        with self._session() as s:
            row = InsuranceOrderRow(**order.model_dump())
            s.add(row)
            s.flush()
            order_id = row.id
        logger.info("Inserted insurance order %s (insurance_type=%s)", order_id, order.insurance_type)
        return order_id

    def get_order(self, order_id: str) -> Optional[InsuranceOrder]:
        with self._session() as s:
            row = s.get(InsuranceOrderRow, order_id)
            if row is None:
                return None
            return InsuranceOrder(**{k: getattr(row, k) for k in _ORDER_FIELDS})

    def count_orders(self) -> int:
        with self._session() as s:
            return int(s.scalar(select(func.count()).select_from(InsuranceOrderRow)) or 0)
