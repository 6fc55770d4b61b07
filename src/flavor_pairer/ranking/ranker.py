"""
ranker.py

Multi-level pairing ranker.

Given an ingredient and the ingredient tree, compute a ranked list of
transitively related ingredients out to a requested level:

  Level 1:
    - the ingredient's direct pairings, all with rank 0

  Level n > 1 (applied level - 1 times):
    - every frontier entry is expanded through its own direct pairings
    - each touched candidate is (re)scored as the number of frontier entries
      whose working pairing list contains it (co-occurrence rank)
    - the frontier is sorted by rank, highest first (stable for ties)

Note:
  - A candidate's rank is recomputed against the frontier as it stands at
    that point of the scan, not against the finished frontier. Results can
    therefore depend on the order the previous level is walked in; pairings
    are kept in name order so the walk is the same on every run.
  - PairingRank records live only for one compute call and never touch the
    shared tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.logging_utils import get_logger
from src.flavor_pairer.tree.node import IngredientTree
from src.flavor_pairer.tree.tree_util import find_ingredient

logger = get_logger("ranker")


@dataclass
class PairingRank:
    ingredient: Ingredient
    rank: int = 0
    # Working copy of the ingredient's own pairings, filled lazily
    pairings: List[Ingredient] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ingredient": self.ingredient.name,
            "rank": self.rank,
            "pairings": [p.name for p in self.pairings],
        }


def compute_ingredient_pairing_level(
    ingredient: Optional[Ingredient],
    ingredient_tree: Optional[IngredientTree],
    level: int,
) -> Optional[List[PairingRank]]:
    """
    Compute the ranked pairings of ingredient at the given level.

    Returns:
        None if ingredient or tree is missing (or the tree is empty),
        [] if the ingredient is not in the tree, otherwise the list of
        PairingRank sorted by rank, highest first.

    Raises:
        ValueError: if level < 1.
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    if ingredient is None or ingredient_tree is None or ingredient_tree.root is None:
        return None

    node = find_ingredient(ingredient, ingredient_tree.root)
    if node is None:
        logger.debug(
            "%s is not indexed; no pairings",
            ingredient.name,
            extra={"invoking_func": "compute_ingredient_pairing_level"},
        )
        return []

    pairing_ranks = [PairingRank(p) for p in node.pairings]
    return _expand_level(ingredient_tree, level, pairing_ranks)


def _expand_level(ingredient_tree: IngredientTree, level: int, pairing_ranks: List[PairingRank]) -> List[PairingRank]:
    if level == 1:
        return pairing_ranks

    frontier: Dict[Ingredient, PairingRank] = {pr.ingredient: pr for pr in pairing_ranks}
    for pairing_rank in pairing_ranks:
        # Level-1 entries carry no pairings yet
        if not pairing_rank.pairings:
            pairing_rank.pairings = list(pairing_rank.ingredient.pairings)

        paired_node = find_ingredient(pairing_rank.ingredient, ingredient_tree.root)
        if paired_node is None:
            # Paired ingredient is outside the indexed catalog
            continue

        for candidate in paired_node.ingredient.pairings:
            entry = frontier.get(candidate)
            if entry is not None:
                entry.pairings = list(candidate.pairings)
            else:
                entry = PairingRank(candidate, 0, list(candidate.pairings))
                frontier[candidate] = entry

            entry.rank = sum(1 for other in frontier.values() if candidate in other.pairings)

    logger.debug(
        "Level %d frontier holds %d candidates",
        level,
        len(frontier),
        extra={"invoking_func": "_expand_level", "next_step": f"Expand level {level - 1}"},
    )
    ranked = sorted(frontier.values(), key=lambda pr: pr.rank, reverse=True)
    return _expand_level(ingredient_tree, level - 1, ranked)
