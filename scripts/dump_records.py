#!/usr/bin/env python3
"""
Print a generated record store as JSON.
Usage: from project root:
  python scripts/dump_records.py --seed 42 > records.json
"""

import argparse
import json
import sys

from market_mock.api.schemas import AssetResponse, PriceResponse, PositionResponse
from market_mock.providers import SyntheticRecordSource, build_record_store


def main() -> int:
    parser = argparse.ArgumentParser(description="Print a generated record store as JSON.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    args = parser.parse_args()

    store = build_record_store(SyntheticRecordSource(seed=args.seed))
    payload = {
        "assets": [AssetResponse.model_validate(a).model_dump(mode="json") for a in store.assets],
        "historicalPrices": [PriceResponse.from_result(p).model_dump() for p in store.historical_prices],
        "positions": [PositionResponse.from_record(p).model_dump(by_alias=True) for p in store.positions],
    }
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
