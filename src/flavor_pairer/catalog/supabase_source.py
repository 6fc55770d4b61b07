"""
supabase_source.py

Read the ingredient catalog from Supabase.

Tables:
  ingredients          (id, name)
  ingredient_pairings  (ingredient_id, paired_ingredient_id)

Note:
  - Service role bypasses RLS; read-only access is enough here.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from supabase import Client

from src.flavor_pairer.errors import CatalogLoadError
from src.flavor_pairer.logging_utils import get_logger

logger = get_logger("supabase_source")

PAGE_SIZE = 1000


def _fetch_all(client: Client, table: str, columns: str) -> List[dict]:
    # PostgREST caps responses, so page through with range()
    rows: List[dict] = []
    start = 0
    while True:
        res = client.table(table).select(columns).range(start, start + PAGE_SIZE - 1).execute()
        batch = res.data or []
        rows.extend(batch)
        if len(batch) < PAGE_SIZE:
            break
        start += PAGE_SIZE
    return rows


def fetch_pairing_rows(client: Client) -> List[Tuple[str, Optional[str]]]:
    """
    Return ``(ingredient_name, paired_name)`` rows for IngredientCatalog.from_rows.

    Every ingredient is emitted at least once with a None pairing so that
    ingredients without pairings still join the catalog.
    """
    ingredient_rows = _fetch_all(client, "ingredients", "id,name")
    names_by_id: Dict[str, str] = {}
    for row in ingredient_rows:
        if row.get("id") is None or not row.get("name"):
            continue
        names_by_id[str(row["id"])] = row["name"]

    rows: List[Tuple[str, Optional[str]]] = [(name, None) for name in names_by_id.values()]

    for row in _fetch_all(client, "ingredient_pairings", "ingredient_id,paired_ingredient_id"):
        src_id = str(row.get("ingredient_id"))
        dst_id = str(row.get("paired_ingredient_id"))
        if src_id not in names_by_id or dst_id not in names_by_id:
            logger.error(
                "Pairing row references unknown ingredient id",
                extra={
                    "invoking_func": "fetch_pairing_rows",
                    "resolution": "Fix foreign keys in ingredient_pairings",
                },
            )
            raise CatalogLoadError(f"ingredient_pairings row {src_id}->{dst_id} references a missing ingredient")
        rows.append((names_by_id[src_id], names_by_id[dst_id]))

    logger.info(
        "Fetched %d ingredients and %d pairing rows from Supabase",
        len(names_by_id),
        len(rows) - len(names_by_id),
        extra={"invoking_func": "fetch_pairing_rows", "next_step": "Assemble catalog"},
    )
    return rows
