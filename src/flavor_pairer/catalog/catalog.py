# src/flavor_pairer/catalog/catalog.py
from __future__ import annotations

"""
catalog.py

Purpose:
    Build the immutable ingredient catalog (ingredient -> direct pairings)
    from a plain mapping or a two-column pairing CSV.

What this does:
1. Normalizes CSV column names so "Ingredient", "ingredient_name", "item" all
   map to the ingredient column and "Pairing", "pairs_with", "goes_with" map to
   the pairing column.
2. Creates exactly one Ingredient per case-insensitive name.
3. Optionally mirrors every pairing (a -> b also records b -> a), since
   flavor pairing charts are usually read in both directions.
"""

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Union

import pandas as pd

from src.flavor_pairer.catalog.base import Ingredient, name_key
from src.flavor_pairer.errors import CatalogLoadError, IngredientNotFoundError
from src.flavor_pairer.logging_utils import get_logger

logger = get_logger("catalog")

MODULE_PURPOSE = "Load the ingredient catalog and its direct pairings."


def _normalize_col_name(col: str) -> str:
    """
    Normalize column names so we can match them across different pairing sheets.
    Examples:
      "Ingredient Name" -> "ingredient_name"
      "Pairs-With" -> "pairs_with"
    """
    c = str(col).strip().lower()
    for ch in [" ", "-", ".", "(", ")", "[", "]"]:
        c = c.replace(ch, "_")
    while "__" in c:
        c = c.replace("__", "_")
    return c.strip("_")


# Canonical field synonym sets (normalized)
INGREDIENT_COLS = {
    "ingredient",
    "ingredient_name",
    "name",
    "item",
    "source",
}
PAIRING_COLS = {
    "pairing",
    "paired_ingredient",
    "pairs_with",
    "goes_with",
    "pair",
    "target",
}


def _find_col(columns: Iterable[str], candidates: Set[str]) -> Optional[str]:
    for col in columns:
        if _normalize_col_name(col) in candidates:
            return col
    return None


def _clean_cell(value: object) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


class IngredientCatalog:
    """Fixed set of ingredients, each exposing its direct pairings."""

    def __init__(self, ingredients: Iterable[Ingredient]) -> None:
        self._by_key: Dict[str, Ingredient] = {}
        for ing in ingredients:
            self._by_key.setdefault(ing.key, ing)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Iterable[str]],
        *,
        symmetric: bool = True,
    ) -> "IngredientCatalog":
        """
        Build a catalog from ``name -> iterable of paired names``.

        Names that only appear as pairing targets still become catalog
        members (with whatever pairings symmetry gives them).
        """
        ingredients: Dict[str, Ingredient] = {}
        edges: Dict[str, Set[str]] = {}

        def _ingredient(name: str) -> Ingredient:
            key = name_key(name)
            if key not in ingredients:
                ingredients[key] = Ingredient(name)
                edges[key] = set()
            return ingredients[key]

        for name, paired_names in mapping.items():
            source = _ingredient(name)
            for paired in paired_names or ():
                target = _ingredient(paired)
                if target.key == source.key:
                    continue
                edges[source.key].add(target.key)
                if symmetric:
                    edges[target.key].add(source.key)

        for key, ing in ingredients.items():
            ing._set_pairings(ingredients[k] for k in edges[key])

        logger.debug(
            "Catalog assembled with %d ingredients",
            len(ingredients),
            extra={
                "invoking_func": "from_mapping",
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Construct ingredient tree",
            },
        )
        return cls(ingredients.values())

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[tuple],
        *,
        symmetric: bool = True,
    ) -> "IngredientCatalog":
        """Build from ``(ingredient, pairing)`` rows; a None pairing only registers the ingredient."""
        mapping: Dict[str, List[str]] = {}
        for ingredient_name, pairing_name in rows:
            ingredient_name = _clean_cell(ingredient_name)
            if ingredient_name is None:
                continue
            bucket = mapping.setdefault(ingredient_name, [])
            pairing_name = _clean_cell(pairing_name)
            if pairing_name is not None:
                bucket.append(pairing_name)
        return cls.from_mapping(mapping, symmetric=symmetric)

    @classmethod
    def from_csv(
        cls,
        path: Union[str, Path],
        *,
        symmetric: bool = True,
    ) -> "IngredientCatalog":
        """
        Load a two-column pairing CSV (ingredient, pairing) with pandas.

        Raises:
            CatalogLoadError: if the file is missing the expected columns.
        """
        path = Path(path)
        df = pd.read_csv(path, dtype=str, keep_default_na=True)

        ingredient_col = _find_col(df.columns, INGREDIENT_COLS)
        pairing_col = _find_col(df.columns, PAIRING_COLS)
        if ingredient_col is None or pairing_col is None:
            logger.error(
                "Pairing CSV %s has no ingredient/pairing columns (found %s)",
                path,
                list(df.columns),
                extra={
                    "invoking_func": "from_csv",
                    "invoking_purpose": MODULE_PURPOSE,
                    "resolution": "Rename columns to 'ingredient' and 'pairing'",
                },
            )
            raise CatalogLoadError(f"{path}: expected 'ingredient' and 'pairing' columns")

        catalog = cls.from_rows(
            zip(df[ingredient_col].tolist(), df[pairing_col].tolist()),
            symmetric=symmetric,
        )
        logger.info(
            "Loaded %d ingredients from %s",
            len(catalog),
            path.name,
            extra={
                "invoking_func": "from_csv",
                "invoking_purpose": MODULE_PURPOSE,
                "next_step": "Construct ingredient tree",
            },
        )
        return catalog

    @classmethod
    def from_supabase(cls, client, *, symmetric: bool = True) -> "IngredientCatalog":
        # Imported lazily so CSV users never touch the supabase client module
        from src.flavor_pairer.catalog.supabase_source import fetch_pairing_rows

        return cls.from_rows(fetch_pairing_rows(client), symmetric=symmetric)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get(self, name: str) -> Optional[Ingredient]:
        if not isinstance(name, str):
            return None
        return self._by_key.get(name_key(name))

    def require(self, name: str) -> Ingredient:
        ing = self.get(name)
        if ing is None:
            raise IngredientNotFoundError(name)
        return ing

    @property
    def ingredients(self) -> List[Ingredient]:
        """All ingredients in case-insensitive name order."""
        return [self._by_key[k] for k in sorted(self._by_key)]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Ingredient):
            return item.key in self._by_key
        if isinstance(item, str):
            return name_key(item) in self._by_key
        return False

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self.ingredients)

    def __len__(self) -> int:
        return len(self._by_key)
