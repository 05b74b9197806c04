# src/rating_engine/scripts/quote.py
"""
Price a single request from the command line.

Usage:
  rating-engine-quote --revenue 50000 --state CA --business retail

Optional:
  rating-engine-quote --revenue 50000 --state CA --business retail \
    --rate_table config/rates.json

Exit codes: 0 on success, 2 when the request fails validation.
"""

from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from rating_engine.engine.service import get_service
from rating_engine.pricing.errors import RatingError
from rating_engine.pricing.quote import generate_quote_id


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compute an insurance premium quote.")
    p.add_argument("--revenue", type=float, required=True, help="Annual revenue (e.g., 50000)")
    p.add_argument("--state", type=str, required=True, help="US state code (e.g., CA)")
    p.add_argument("--business", type=str, required=True, help="Business category (e.g., retail)")
    p.add_argument("--rate_table", type=str, default=None, help="Rate table JSON path. Default: RATE_TABLE_PATH or built-in")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    service = get_service(rate_table_path=args.rate_table, force_reload=args.rate_table is not None)

    payload = {"revenue": args.revenue, "state": args.state, "business": args.business}
    try:
        result = service.rate(payload)
    except RatingError as e:
        print(json.dumps({"error": e.message}))
        return 2

    out = {"quoteId": generate_quote_id(), **result.to_dict()}
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
