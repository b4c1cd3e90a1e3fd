# src/utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    data_dir: Path
    seed_dir: Path
    insurance_types_csv: Path
    age_brackets_csv: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/utils/config.py
    """
    return Path(__file__).resolve().parents[2]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    data_dir = root / "data"
    seed_dir = Path(_env("SEED_DIR", str(data_dir / "seed")) or data_dir / "seed")
    return ProjectPaths(
        root=root,
        data_dir=data_dir,
        seed_dir=seed_dir,
        insurance_types_csv=seed_dir / "insurance_types.csv",
        age_brackets_csv=seed_dir / "age_adjustment_rates.csv",
    )


@dataclass(frozen=True)
class DatabaseConfig:
    url: str
    echo: bool


def get_database_config() -> DatabaseConfig:
    """
    Configure the estimate store via environment variables.
    Defaults to a local SQLite file so local runs are frictionless.

    Env:
      DATABASE_URL (default: sqlite:///<root>/data/estimate.db)
      DB_ECHO      (default: false)
    """
    default_url = f"sqlite:///{get_paths().data_dir / 'estimate.db'}"
    return DatabaseConfig(
        url=_env("DATABASE_URL", default_url) or default_url,
        echo=(_env("DB_ECHO", "false") or "false").lower() in {"1", "true", "yes"},
    )
