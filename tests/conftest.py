"""Pytest fixtures for estimate tests."""

from datetime import date

import pytest

from src.estimate.schemas import InsuranceOrder
from src.estimate.service import EstimateService
from src.storage.memory import InMemoryEstimateStore
from src.storage.seed import load_age_brackets, load_insurance_types, seed_store
from src.storage.sql_store import SqlEstimateStore
from src.utils.config import get_paths


@pytest.fixture
def memory_store():
    """In-memory store loaded with the shipped seed tables."""
    paths = get_paths()
    return InMemoryEstimateStore(
        insurance_types=load_insurance_types(paths.insurance_types_csv),
        age_brackets=load_age_brackets(paths.age_brackets_csv),
    )


@pytest.fixture
def sql_store():
    """SQLite in-memory store with tables created and seeded."""
    store = SqlEstimateStore("sqlite://")
    store.create_tables()
    seed_store(store)
    return store


@pytest.fixture
def service(memory_store):
    return EstimateService(memory_store)


@pytest.fixture
def order():
    return InsuranceOrder(
        insurance_type=1,
        date_of_birth=date(1990, 4, 1),
        annual_fee=39600,
        refund_amount=7920,
        name="Taro Tanaka",
        name_kana="タナカ タロウ",
        gender="male",
        email="taro@example.com",
        phone_number="090-1234-5678",
        postal_code="100-0001",
        address="1-1 Chiyoda, Chiyoda-ku, Tokyo",
        discovery_source=1,
    )
