"""Tests for annual fee / refund calculation."""

import dataclasses

import pytest

from src.codes.insurance_type import InsuranceType
from src.pricing.config import PricingConfig
from src.pricing.errors import UnknownInsuranceType
from src.pricing.quote import QuoteResult, compute_quote, fixed_refund_rate, truncate


def test_medical_example():
    r = compute_quote(1, monthly_fee=3000, age_adjustment_rate=1.0, age=30)
    assert r == QuoteResult(annual_fee=36000, age_adjustment_rate=1.0, age=30, refund_amount=7200)


@pytest.mark.parametrize(
    "code, rate",
    [(1, 0.20), (2, 0.15), (3, 0.35), (InsuranceType.CANCER, 0.35)],
)
def test_fixed_refund_rates(code, rate):
    assert fixed_refund_rate(code) == rate


@pytest.mark.parametrize("code", [0, 4, 99, -1, None])
def test_unknown_insurance_type_raises(code):
    with pytest.raises(UnknownInsuranceType):
        fixed_refund_rate(code)


def test_unknown_insurance_type_is_not_zero_rated():
    with pytest.raises(UnknownInsuranceType, match="Invalid insurance type: 7"):
        compute_quote(7, monthly_fee=3000, age_adjustment_rate=1.0, age=30)


def test_unknown_insurance_type_is_key_error():
    with pytest.raises(KeyError):
        fixed_refund_rate(4)


def test_product_missing_from_refund_table():
    cfg = PricingConfig(refund_rates={InsuranceType.MEDICAL: 0.2})
    with pytest.raises(UnknownInsuranceType):
        compute_quote(InsuranceType.DEATH, 2500, 1.0, 40, cfg=cfg)


def test_annual_fee_is_truncated_not_rounded():
    # 1 * 12 * 0.99 = 11.88
    r = compute_quote(1, monthly_fee=1, age_adjustment_rate=0.99, age=25)
    assert r.annual_fee == 11
    # 11.88 * 0.2 = 2.376
    assert r.refund_amount == 2


def test_refund_uses_unrounded_annual_fee():
    # 2000 * 12 * 1.0002875 = 24006.9 (unrounded)
    r = compute_quote(InsuranceType.DEATH, monthly_fee=2000, age_adjustment_rate=1.0002875, age=45)
    assert r.annual_fee == 24006
    # 24006.9 * 0.15 = 3601.035 -> 3601
    assert r.refund_amount == 3601
    # truncating first would give 24006 * 0.15 = 3600.9 -> 3600
    assert truncate(r.annual_fee * 0.15) == 3600


def test_compute_quote_is_deterministic():
    a = compute_quote(3, 2000, 1.6, 55)
    b = compute_quote(3, 2000, 1.6, 55)
    assert a == b


def test_result_carries_rate_and_age():
    r = compute_quote(2, 2500, 2.0, 66)
    assert r.age == 66
    assert r.age_adjustment_rate == 2.0
    assert r.annual_fee == 60000


def test_result_is_immutable():
    r = compute_quote(1, 3000, 1.0, 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.annual_fee = 0  # type: ignore[misc]


def test_net_annual_fee_and_to_dict():
    r = compute_quote(1, 3000, 1.0, 30)
    assert r.net_annual_fee == 28800
    assert r.to_dict() == {
        "annual_fee": 36000,
        "age_adjustment_rate": 1.0,
        "age": 30,
        "refund_amount": 7200,
    }


@pytest.mark.parametrize("value, expected", [(1.9, 1), (-1.9, -1), (0.0, 0), (12060.0, 12060)])
def test_truncate_toward_zero(value, expected):
    assert truncate(value) == expected


@pytest.mark.parametrize("code", ["--3", "-", "²", "1.0"])
def test_malformed_code_strings_are_unknown_types(code):
    with pytest.raises(UnknownInsuranceType):
        compute_quote(code, monthly_fee=3000, age_adjustment_rate=1.0, age=30)
