# src/storage/seed.py
"""
Load rate tables (insurance types + age adjustment brackets) from seed files.

Seed files (CSV or Parquet):
- insurance_types        : code, name, monthly_fee
- age_adjustment_rates   : min_age, max_age, rate

Brackets must not overlap; gaps are allowed but reported as warnings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from src.storage.base import AgeBracket, InsuranceTypeRecord
from src.utils.config import ProjectPaths, get_paths
from src.utils.io import read_df, require_columns

logger = logging.getLogger(__name__)


def load_insurance_types(path: Union[str, Path]) -> List[InsuranceTypeRecord]:
    df = read_df(path)
    require_columns(df, ["code", "name", "monthly_fee"], path)
    if df["code"].duplicated().any():
        dups = sorted(df.loc[df["code"].duplicated(), "code"].tolist())
        raise ValueError(f"{path}: duplicate insurance type codes {dups}")
    return [
        InsuranceTypeRecord(code=int(r.code), name=str(r.name), monthly_fee=int(r.monthly_fee))
        for r in df.itertuples(index=False)
    ]


def load_age_brackets(path: Union[str, Path]) -> List[AgeBracket]:
    df = read_df(path)
    require_columns(df, ["min_age", "max_age", "rate"], path)
    df = df.sort_values("min_age").reset_index(drop=True)

    bad = df[df["min_age"] > df["max_age"]]
    if not bad.empty:
        raise ValueError(f"{path}: min_age > max_age in rows {bad.index.tolist()}")

    prev_max = df["max_age"].shift(1)
    overlap = df[df["min_age"] <= prev_max]
    if not overlap.empty:
        raise ValueError(f"{path}: overlapping age brackets starting at {overlap['min_age'].tolist()}")
    gaps = df[(prev_max.notna()) & (df["min_age"] > prev_max + 1)]
    for m in gaps["min_age"].tolist():
        logger.warning("Age bracket gap before age %s in %s", m, path)

    return [
        AgeBracket(min_age=int(r.min_age), max_age=int(r.max_age), rate=float(r.rate))
        for r in df.itertuples(index=False)
    ]


def seed_store(store, paths: Optional[ProjectPaths] = None) -> dict:
    """
    Load seed files into any store exposing upsert_insurance_types /
    replace_age_brackets. Returns row counts.
    """
    paths = paths or get_paths()
    types = load_insurance_types(paths.insurance_types_csv)
    brackets = load_age_brackets(paths.age_brackets_csv)
    n_types = store.upsert_insurance_types(types)
    n_brackets = store.replace_age_brackets(brackets)
    logger.info("Seeded %d insurance types and %d age brackets from %s", n_types, n_brackets, paths.seed_dir)
    return {"insurance_types": n_types, "age_brackets": n_brackets}


def summarize_brackets(brackets: List[AgeBracket]) -> pd.DataFrame:
    return pd.DataFrame([{"min_age": b.min_age, "max_age": b.max_age, "rate": b.rate} for b in brackets])
