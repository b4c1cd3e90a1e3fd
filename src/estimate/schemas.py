# src/estimate/schemas.py
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.codes.discovery_source import DiscoverySourceType
from src.codes.insurance_type import InsuranceType


class QuoteRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    insurance_type: int
    date_of_birth: date

    @field_validator("insurance_type")
    @classmethod
    def _known_insurance_type(cls, v: int) -> int:
        if InsuranceType.from_code(v) is None:
            raise ValueError(f"unknown insurance type code: {v}")
        return v


class InsuranceOrder(BaseModel):
    """
    Accepted quote request plus applicant details, as handed to storage.

    Only the shape is checked here; how it is persisted belongs to the store.
    """

    model_config = ConfigDict(frozen=True)

    # Selected quote
    insurance_type: int
    date_of_birth: date
    annual_fee: int = Field(ge=0)
    refund_amount: int = Field(ge=0)

    # Applicant
    name: str = Field(min_length=1, max_length=128)
    name_kana: Optional[str] = Field(default=None, max_length=128)
    gender: Optional[Literal["male", "female", "other"]] = None
    email: str = Field(min_length=3, max_length=256, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str = Field(min_length=1, max_length=32)
    postal_code: Optional[str] = Field(default=None, max_length=16)
    address: str = Field(min_length=1, max_length=512)

    # Reporting only
    discovery_source: Optional[int] = None

    @field_validator("insurance_type")
    @classmethod
    def _known_insurance_type(cls, v: int) -> int:
        if InsuranceType.from_code(v) is None:
            raise ValueError(f"unknown insurance type code: {v}")
        return v

    @field_validator("discovery_source")
    @classmethod
    def _known_discovery_source(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and DiscoverySourceType.from_code(v) is None:
            raise ValueError(f"unknown discovery source code: {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
