# src/scripts/init_db.py
"""
Create the estimate tables and load rate tables from seed files.

Usage:
  python -m src.scripts.init_db

Optional:
  python -m src.scripts.init_db --database_url sqlite:///data/estimate.db --skip_seed

Env:
  DATABASE_URL (default: sqlite:///<root>/data/estimate.db)
  SEED_DIR     (default: <root>/data/seed)
"""

from __future__ import annotations

import argparse
import logging

from src.storage.seed import load_age_brackets, seed_store, summarize_brackets
from src.storage.sql_store import SqlEstimateStore
from src.utils.config import get_database_config, get_paths
from src.utils.io import ensure_dir


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create estimate tables and seed rate data.")
    p.add_argument("--database_url", type=str, default=None, help="Overrides DATABASE_URL.")
    p.add_argument("--skip_seed", action="store_true", help="Only create tables.")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    paths = get_paths()
    db = get_database_config()
    url = args.database_url or db.url
    if url.startswith("sqlite:///"):
        ensure_dir(paths.data_dir)

    store = SqlEstimateStore(url, echo=db.echo)
    store.create_tables()
    print(f"[OK] Tables created   : {url}")

    if args.skip_seed:
        return

    counts = seed_store(store, paths)
    print(f"[OK] Insurance types  : {counts['insurance_types']}")
    print(f"[OK] Age brackets     : {counts['age_brackets']}")
    print(summarize_brackets(load_age_brackets(paths.age_brackets_csv)).to_string(index=False))


if __name__ == "__main__":
    main()
