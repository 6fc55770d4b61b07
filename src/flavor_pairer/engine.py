# src/flavor_pairer/engine.py
from __future__ import annotations

"""
engine.py

Purpose:
    Thin orchestration over the tree and the ranker: build the tree once from
    a catalog, then answer "what pairs with X?" with three levels:
      - first level: X's direct pairings (a set)
      - second / third level: ranked PairingRank lists
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.catalog.catalog import IngredientCatalog
from src.flavor_pairer.logging_utils import get_logger
from src.flavor_pairer.ranking.ranker import PairingRank, compute_ingredient_pairing_level
from src.flavor_pairer.tree.builder import construct_ingredient_tree, delete_ingredient
from src.flavor_pairer.tree.node import IngredientTree

logger = get_logger("engine")


@dataclass
class IngredientPairingResponse:
    ingredient: Ingredient
    first_level_pairings: Set[Ingredient] = field(default_factory=set)
    second_level_pairing_ranks: List[PairingRank] = field(default_factory=list)
    third_level_pairing_ranks: List[PairingRank] = field(default_factory=list)

    def to_dict(self, limit: Optional[int] = None) -> Dict[str, Any]:
        """JSON-ready view; limit truncates the ranked levels."""
        second = self.second_level_pairing_ranks[:limit] if limit else self.second_level_pairing_ranks
        third = self.third_level_pairing_ranks[:limit] if limit else self.third_level_pairing_ranks
        return {
            "ingredient": self.ingredient.name,
            "first_level_pairings": [i.name for i in sorted(self.first_level_pairings)],
            "second_level_pairing_ranks": [pr.to_dict() for pr in second],
            "third_level_pairing_ranks": [pr.to_dict() for pr in third],
        }


class IngredientPairingEngine:
    def __init__(self, catalog: IngredientCatalog) -> None:
        self.catalog = catalog
        self.tree: IngredientTree = construct_ingredient_tree(catalog.ingredients)

    def compute_pairings(self, ingredient: Ingredient) -> Optional[IngredientPairingResponse]:
        """
        Compute levels 1-3 for an ingredient.

        Returns:
            None when the ingredient is not indexed in the tree.
        """
        first = compute_ingredient_pairing_level(ingredient, self.tree, 1)
        if first is None or (not first and ingredient not in self.tree):
            logger.info(
                "No pairings: %s is not indexed",
                getattr(ingredient, "name", ingredient),
                extra={"invoking_func": "compute_pairings"},
            )
            return None

        response = IngredientPairingResponse(ingredient)
        response.first_level_pairings = {pr.ingredient for pr in first}
        response.second_level_pairing_ranks = compute_ingredient_pairing_level(ingredient, self.tree, 2) or []
        response.third_level_pairing_ranks = compute_ingredient_pairing_level(ingredient, self.tree, 3) or []

        logger.info(
            "Pairings for %s: %d / %d / %d",
            ingredient.name,
            len(response.first_level_pairings),
            len(response.second_level_pairing_ranks),
            len(response.third_level_pairing_ranks),
            extra={"invoking_func": "compute_pairings", "next_step": "Return response"},
        )
        return response

    def compute_pairings_by_name(self, name: str) -> Optional[IngredientPairingResponse]:
        """Resolve name via the catalog; raises IngredientNotFoundError if unknown."""
        return self.compute_pairings(self.catalog.require(name))

    def remove_ingredient(self, ingredient: Ingredient) -> None:
        """Drop an ingredient from the index (full tree rebuild)."""
        self.tree = delete_ingredient(self.tree, ingredient)
        logger.info(
            "Removed %s; %d ingredients indexed",
            ingredient.name,
            len(self.tree),
            extra={"invoking_func": "remove_ingredient"},
        )
