"""
pairing_example.py

Example usage of the IngredientPairingEngine.

Run:
  python -m src.flavor_pairer.pairing_example --ingredient Zucchini
  python -m src.flavor_pairer.pairing_example --ingredient basil --catalog data/flavor_pairings.csv --json

Requires:
  A pairing CSV (FLAVOR_PAIRER_CATALOG_CSV or --catalog), or
  FLAVOR_PAIRER_CATALOG_SOURCE=supabase with SUPABASE_URL and
  SUPABASE_SERVICE_ROLE_KEY set.
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from src.flavor_pairer.config import get_settings, load_catalog
from src.flavor_pairer.engine import IngredientPairingEngine
from src.flavor_pairer.errors import IngredientNotFoundError
from src.flavor_pairer.logging_utils import LOG_RUN_ID, init_logging, log_error, log_info


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--ingredient", required=True)
    ap.add_argument("--catalog", help="Pairing CSV (overrides FLAVOR_PAIRER_CATALOG_CSV)")
    ap.add_argument("--limit", type=int, default=10)
    ap.add_argument("--json", action="store_true", help="Print the response as JSON")
    args = ap.parse_args(argv)

    settings = get_settings()
    init_logging(getattr(logging, settings.log_level, logging.INFO))
    if args.catalog:
        settings.catalog_source = "csv"
        settings.catalog_csv = args.catalog

    log_info(
        f"Run {LOG_RUN_ID}: pairing lookup for {args.ingredient!r}",
        invoking_func="main",
        next_step="Load catalog",
    )
    engine = IngredientPairingEngine(load_catalog(settings))

    try:
        response = engine.compute_pairings_by_name(args.ingredient)
    except IngredientNotFoundError as exc:
        log_error(
            str(exc),
            invoking_func="main",
            resolution="Check spelling or add the ingredient to the catalog",
        )
        return 1

    if response is None:
        return 1

    if args.json:
        print(json.dumps(response.to_dict(limit=args.limit), indent=2))
        return 0

    print(f"{response.ingredient.name}")
    print("  Level 1:", ", ".join(i.name for i in sorted(response.first_level_pairings)) or "-")
    for label, ranks in (
        ("Level 2", response.second_level_pairing_ranks),
        ("Level 3", response.third_level_pairing_ranks),
    ):
        print(f"  {label}:")
        for i, pr in enumerate(ranks[: args.limit], start=1):
            print(f"    {i:02d}. {pr.ingredient.name}  rank={pr.rank}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
