# src/codes/insurance_type.py
"""Insurance products offered for quoting. Codes match the insurance_types table."""

from __future__ import annotations

from src.codes.code_enum import CodeEnum


class InsuranceType(CodeEnum):
    MEDICAL = (1, "Medical insurance")
    DEATH = (2, "Life (death) insurance")
    CANCER = (3, "Cancer insurance")
