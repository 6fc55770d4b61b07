# src/flavor_pairer/tree/tree_util.py
from __future__ import annotations

"""
tree_util.py

Purpose:
    Read-only queries over an ingredient tree: search, depth, in-order
    flatten and the balance check. The builder uses depth() for its
    rebalancing decisions; deletion uses get_ingredients() to rebuild.
"""

from typing import Iterable, List, Optional

from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.tree.node import IngredientNode


def create_ingredient_nodes(ingredients: Iterable[Ingredient]) -> List[IngredientNode]:
    """Wrap each ingredient in a fresh, childless node."""
    return [IngredientNode(ingredient) for ingredient in ingredients]


def find_ingredient(ingredient: Ingredient, root: Optional[IngredientNode]) -> Optional[IngredientNode]:
    """
    Ordered binary search by case-insensitive name.

    Returns:
        The node holding the ingredient, or None when it is not in the tree.
    """
    if ingredient is None:
        return None
    key = ingredient.key
    node = root
    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return node
    return None


def get_depth(node: Optional[IngredientNode]) -> int:
    """0 for an absent node, else 1 + the deeper child's depth."""
    if node is None:
        return 0
    return 1 + max(get_depth(node.left), get_depth(node.right))


def get_ingredients(root: Optional[IngredientNode]) -> List[Ingredient]:
    """In-order flatten: ingredients in case-insensitive name order."""
    out: List[Ingredient] = []
    stack: List[IngredientNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.ingredient)
        node = node.right
    return out


def is_balanced(root: Optional[IngredientNode]) -> bool:
    """True when no node's subtree depths differ by more than one."""

    def _check(node: Optional[IngredientNode]) -> int:
        # Returns the depth, or -1 as soon as an imbalance is found
        if node is None:
            return 0
        left = _check(node.left)
        if left < 0:
            return -1
        right = _check(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return _check(root) >= 0
