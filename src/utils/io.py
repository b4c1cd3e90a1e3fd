from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Sequence, Union

import pandas as pd


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def to_json(obj: Any) -> str:
    payload = asdict(obj) if is_dataclass(obj) else obj
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def read_df(path: Union[str, Path]) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suf = path.suffix.lower()
    if suf == ".csv":
        return pd.read_csv(path)
    if suf == ".parquet":
        return pd.read_parquet(path)
    raise ValueError(f"Unsupported dataframe format: {suf}")


def require_columns(df: pd.DataFrame, columns: Sequence[str], source: Union[str, Path]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"{source} missing columns: {missing}. Found columns: {list(df.columns)}")
