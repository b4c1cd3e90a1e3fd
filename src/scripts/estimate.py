"""
Print a quote for one product and birth date.

  python -m src.scripts.estimate --insurance_type 1 --dob 1990/04/01
"""

from __future__ import annotations

import argparse
import logging
import sys

from src.codes.insurance_type import InsuranceType
from src.estimate.inputs import format_date_of_birth, parse_date_of_birth
from src.estimate.service import get_service
from src.utils.io import to_json


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Quote an annual premium.")
    p.add_argument("--insurance_type", type=int, required=True, choices=[t.code for t in InsuranceType])
    p.add_argument("--dob", type=str, required=True, help="Date of birth, YYYY/MM/DD")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.WARNING)

    dob = parse_date_of_birth(args.dob)
    svc = get_service()

    if not svc.is_age_valid(dob):
        cfg = svc.cfg
        print(f"[NG] Age must be between {cfg.min_age} and {cfg.max_age}", file=sys.stderr)
        return 1

    result = svc.quote(args.insurance_type, dob)
    out = {
        "insurance_type": args.insurance_type,
        "insurance_name": svc.insurance_type_name(args.insurance_type),
        "date_of_birth": format_date_of_birth(dob),
        **result.to_dict(),
        "net_annual_fee": result.net_annual_fee,
    }
    print(to_json(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
