"""Tests for the estimate service (quote + order registration)."""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from src.estimate import service as service_module
from src.estimate.service import EstimateService, get_service
from src.pricing.errors import NotFound, RateNotFound, UnknownInsuranceType
from src.pricing.quote import QuoteResult
from src.storage.base import AgeBracket, EstimateStore, InsuranceTypeRecord
from src.storage.memory import InMemoryEstimateStore
from src.storage.sql_store import SqlEstimateStore

TODAY = date(2026, 10, 18)


def test_list_insurance_types(service):
    types = service.list_insurance_types()
    assert [t.code for t in types] == [1, 2, 3]
    assert types[0] == InsuranceTypeRecord(code=1, name="Medical insurance", monthly_fee=3000)


def test_insurance_type_name(service):
    assert service.insurance_type_name(3) == "Cancer insurance"


def test_insurance_type_name_unknown(service):
    with pytest.raises(NotFound):
        service.insurance_type_name(42)


def test_quote_medical_age_26(service):
    # 26 -> bracket 20-29 rate 1.0; 3000 * 12 * 1.0 = 36000
    r = service.quote(1, date(2000, 1, 15), today=TODAY)
    assert r == QuoteResult(annual_fee=36000, age_adjustment_rate=1.0, age=26, refund_amount=7200)


def test_quote_death_age_66(service):
    # 66 -> bracket 60-69 rate 2.0; 2500 * 12 * 2.0 = 60000; refund 15%
    r = service.quote(2, date(1960, 5, 5), today=TODAY)
    assert r.age == 66
    assert r.age_adjustment_rate == 2.0
    assert r.annual_fee == 60000
    assert r.refund_amount == 9000


def test_quote_does_not_gate_on_eligibility(service):
    # age 10 is outside the band but is still priced from the store's rates
    dob = date(2016, 1, 1)
    assert not service.is_age_valid(dob, today=TODAY)
    r = service.quote(1, dob, today=TODAY)
    assert r.age == 10
    assert r.annual_fee == 36000


def test_is_age_valid(service):
    assert service.is_age_valid(date(1990, 4, 1), today=TODAY)
    assert not service.is_age_valid(date(1900, 1, 1), today=TODAY)


def test_quote_unknown_product_in_store(service):
    with pytest.raises(RateNotFound):
        service.quote(9, date(1990, 4, 1), today=TODAY)


def test_quote_product_without_refund_rate():
    store = InMemoryEstimateStore(
        insurance_types=[InsuranceTypeRecord(code=4, name="Pet insurance", monthly_fee=1000)],
        age_brackets=[AgeBracket(0, 150, 1.0)],
    )
    with pytest.raises(UnknownInsuranceType):
        EstimateService(store).quote(4, date(1990, 4, 1), today=TODAY)


def test_register_order(service, memory_store, order):
    order_id = service.register_order(order)
    assert memory_store.get_order(order_id) == order
    assert memory_store.count_orders() == 1


class _FailingStore(InMemoryEstimateStore):
    def insert_order(self, order):
        raise OperationalError("INSERT INTO insurance_orders", {}, Exception("disk I/O error"))


def test_register_order_propagates_storage_failure(order):
    store = _FailingStore()
    with pytest.raises(OperationalError):
        EstimateService(store).register_order(order)
    assert store.count_orders() == 0


def test_sql_backed_service(sql_store, order):
    svc = EstimateService(sql_store)
    r = svc.quote(1, date(2000, 1, 15), today=TODAY)
    assert (r.annual_fee, r.refund_amount) == (36000, 7200)

    order_id = svc.register_order(order)
    assert sql_store.get_order(order_id) == order


def test_stores_satisfy_protocol(memory_store, sql_store):
    assert isinstance(memory_store, EstimateStore)
    assert isinstance(sql_store, EstimateStore)


def test_get_service_uses_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setattr(service_module, "_CACHED_SERVICE", None)
    svc = get_service()
    assert isinstance(svc.store, SqlEstimateStore)
    assert get_service() is svc
    assert get_service(force_reload=True) is not svc
