# src/flavor_pairer/catalog/base.py
from __future__ import annotations

"""
base.py

Purpose:
    The Ingredient record shared by every layer (catalog, tree, ranking).

    An Ingredient is identified by its name, compared case-insensitively.
    Its direct pairings are attached once while the catalog is assembled and
    are read-only afterwards. Pairings are kept in name order so that any
    walk over them visits ingredients in the same order on every run.
"""

from typing import Iterable, Tuple


def name_key(name: str) -> str:
    """Case-insensitive comparison key for ingredient names."""
    # Folds to lower case, so "_" sorts before every letter
    return name.strip().lower()


class Ingredient:
    __slots__ = ("_name", "_key", "_pairings")

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("ingredient name must be a non-empty string")
        self._name = name.strip()
        self._key = name_key(name)
        self._pairings: Tuple[Ingredient, ...] = ()

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    @property
    def pairings(self) -> Tuple["Ingredient", ...]:
        """Directly paired ingredients, in case-insensitive name order."""
        return self._pairings

    def _set_pairings(self, pairings: Iterable["Ingredient"]) -> None:
        # Only IngredientCatalog calls this, while the catalog is assembled
        unique = {p.key: p for p in pairings if p.key != self._key}
        self._pairings = tuple(unique[k] for k in sorted(unique))

    def pairs_with(self, other: "Ingredient") -> bool:
        return other in self._pairings

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __lt__(self, other: "Ingredient") -> bool:
        return self._key < other._key

    def __repr__(self) -> str:
        return f"Ingredient({self._name!r})"

    def __str__(self) -> str:
        return self._name
