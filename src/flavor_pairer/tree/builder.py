# src/flavor_pairer/tree/builder.py
from __future__ import annotations

"""
builder.py

Purpose:
    Build a height-balanced binary search tree of ingredients keyed by
    case-insensitive name, and rebuild it when an ingredient is deleted.

Insertion:
    Nodes are inserted one at a time. On the way back up from each recursive
    insert the newly heavier child is compared against its sibling; when the
    depth difference exceeds 1 the subtree is rotated:
      - outer case (key went left-left / right-right): single rotation
      - inner case (key went left-right / right-left): double rotation

Deletion:
    There is no in-place node removal. The tree is flattened, the ingredient
    dropped from the list and a fresh tree constructed from what remains.
"""

import logging
from typing import List, Optional, Sequence

from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.errors import DuplicateIngredientError
from src.flavor_pairer.logging_utils import get_logger
from src.flavor_pairer.tree.node import IngredientNode, IngredientTree
from src.flavor_pairer.tree.tree_util import (
    create_ingredient_nodes,
    get_depth,
    get_ingredients,
    is_balanced,
)

logger = get_logger("builder")

MODULE_PURPOSE = "Build the height-balanced ingredient tree."


def construct_ingredient_tree(ingredients: Sequence[Ingredient]) -> IngredientTree:
    """
    Construct a balanced IngredientTree from the given ingredients.

    Args:
        ingredients: Non-empty sequence of ingredients with unique names.
            The sequence itself is not modified.

    Returns:
        A new IngredientTree.

    Raises:
        ValueError: if ingredients is None, empty or contains anything that
            is not an Ingredient (including None).
        DuplicateIngredientError: if two ingredients share a name. The whole
            construction is aborted.
    """
    if ingredients is None or len(ingredients) == 0:
        logger.error(
            "Cannot construct a tree without ingredients",
            extra={
                "invoking_func": "construct_ingredient_tree",
                "invoking_purpose": MODULE_PURPOSE,
                "resolution": "Pass a non-empty list",
            },
        )
        raise ValueError("ingredients must be a non-empty list")
    if any(not isinstance(i, Ingredient) for i in ingredients):
        logger.error(
            "Ingredient list contains None or a non-Ingredient entry",
            extra={
                "invoking_func": "construct_ingredient_tree",
                "invoking_purpose": MODULE_PURPOSE,
                "resolution": "Remove invalid entries",
            },
        )
        raise ValueError("ingredients must not contain None")

    root: Optional[IngredientNode] = None
    try:
        for node in create_ingredient_nodes(ingredients):
            root = _add_ingredient_to_tree(root, node)
    except DuplicateIngredientError as exc:
        logger.error(
            "Aborting tree construction on duplicate %r",
            exc.name,
            extra={
                "invoking_func": "construct_ingredient_tree",
                "invoking_purpose": MODULE_PURPOSE,
                "resolution": "Remove the duplicate from the catalog",
            },
        )
        raise

    logger.info(
        "Constructed ingredient tree with %d nodes (depth %d)",
        len(ingredients),
        get_depth(root),
        extra={
            "invoking_func": "construct_ingredient_tree",
            "invoking_purpose": MODULE_PURPOSE,
            "next_step": "Serve pairing requests",
        },
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Balanced after construction: %s", is_balanced(root))
    return IngredientTree(root=root)


def _add_ingredient_to_tree(root: Optional[IngredientNode], node: IngredientNode) -> IngredientNode:
    """Insert node below root and return the (possibly rotated) subtree root."""
    if root is None:
        return node

    if node.key < root.key:
        root.left = _add_ingredient_to_tree(root.left, node)
        if _needs_rebalancing(root.left, root.right):
            if node.key < root.left.key:
                return _rotate_right(root)
            return _double_rotate_right(root)
    elif node.key > root.key:
        root.right = _add_ingredient_to_tree(root.right, node)
        if _needs_rebalancing(root.right, root.left):
            if node.key > root.right.key:
                return _rotate_left(root)
            return _double_rotate_left(root)
    else:
        raise DuplicateIngredientError(node.name)
    return root


def _needs_rebalancing(heavy: Optional[IngredientNode], other: Optional[IngredientNode]) -> bool:
    return get_depth(heavy) - get_depth(other) > 1


def _rotate_right(node: IngredientNode) -> IngredientNode:
    """
    Lift the left child above node.

          P             C
        C   R   ->    L   P
       L M              M   R
    """
    child = node.left
    node.left = child.right
    child.right = node
    logger.debug("rotate right at %s", node.name)
    return child


def _rotate_left(node: IngredientNode) -> IngredientNode:
    """Mirror of _rotate_right: lift the right child above node."""
    child = node.right
    node.right = child.left
    child.left = node
    logger.debug("rotate left at %s", node.name)
    return child


def _double_rotate_right(node: IngredientNode) -> IngredientNode:
    node.left = _rotate_left(node.left)
    return _rotate_right(node)


def _double_rotate_left(node: IngredientNode) -> IngredientNode:
    node.right = _rotate_right(node.right)
    return _rotate_left(node)


# ---------------------------------------------------------------------
# Deletion (full rebuild)
# ---------------------------------------------------------------------
def delete_node_from_tree(root: IngredientNode, ingredient: Ingredient) -> Optional[IngredientNode]:
    """
    Remove ingredient by rebuilding the tree from the remaining ingredients.

    Returns:
        The root of the rebuilt tree, or None when nothing remains. An absent
        ingredient leaves the ingredient list unchanged (the tree is still
        rebuilt).

    Raises:
        ValueError: if root or ingredient is None.
    """
    if root is None:
        raise ValueError("root must not be None")
    if ingredient is None:
        raise ValueError("ingredient must not be None")

    remaining: List[Ingredient] = get_ingredients(root)
    if ingredient in remaining:
        remaining.remove(ingredient)

    if not remaining:
        return None
    return construct_ingredient_tree(remaining).root


def delete_ingredient(tree: IngredientTree, ingredient: Ingredient) -> IngredientTree:
    """Tree-level delete: always returns a new IngredientTree (possibly empty)."""
    if tree is None or tree.root is None:
        raise ValueError("tree must not be None or empty")
    return IngredientTree(root=delete_node_from_tree(tree.root, ingredient))
