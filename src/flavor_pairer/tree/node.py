# src/flavor_pairer/tree/node.py
from __future__ import annotations

"""
node.py

Purpose:
    Node and tree containers for the ingredient search tree.

    Each node owns its left and right children outright (no parent links).
    Rotations hand subtrees from one node to another and return the new
    subtree root to the caller.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from src.flavor_pairer.catalog.base import Ingredient


@dataclass(eq=False)
class IngredientNode:
    """One ingredient in the tree plus a cached copy of its pairings."""

    ingredient: Ingredient
    left: Optional["IngredientNode"] = None
    right: Optional["IngredientNode"] = None
    pairings: Tuple[Ingredient, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.pairings:
            self.pairings = tuple(self.ingredient.pairings)

    @property
    def name(self) -> str:
        return self.ingredient.name

    @property
    def key(self) -> str:
        return self.ingredient.key

    def __repr__(self) -> str:
        return f"IngredientNode({self.ingredient.name!r})"


@dataclass
class IngredientTree:
    """Holds the root of a tree built by construct_ingredient_tree()."""

    root: Optional[IngredientNode] = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        count = 0
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    def __contains__(self, ingredient: object) -> bool:
        # Local import: tree_util imports this module
        from src.flavor_pairer.tree.tree_util import find_ingredient

        if not isinstance(ingredient, Ingredient):
            return False
        return find_ingredient(ingredient, self.root) is not None
