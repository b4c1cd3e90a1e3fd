"""
SQLAlchemy models for insurance types, age adjustment brackets and orders.
Used by src.storage.sql_store.
"""
from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional
from uuid import uuid4
from sqlalchemy import Date, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class InsuranceTypeRow(Base):
    __tablename__ = "insurance_types"

    code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    monthly_fee: Mapped[int] = mapped_column(Integer, nullable=False)


class AgeAdjustmentRateRow(Base):
    __tablename__ = "age_adjustment_rates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    min_age: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    max_age: Mapped[int] = mapped_column(Integer, nullable=False)
    rate: Mapped[float] = mapped_column(Float, nullable=False)


class InsuranceOrderRow(Base):
    __tablename__ = "insurance_orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    insurance_type: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    name_kana: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    postal_code: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    discovery_source: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    annual_fee: Mapped[int] = mapped_column(Integer, nullable=False)
    refund_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
