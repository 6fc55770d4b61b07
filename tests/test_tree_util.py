from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.tree.node import IngredientNode, IngredientTree
from src.flavor_pairer.tree.tree_util import (
    create_ingredient_nodes,
    find_ingredient,
    get_depth,
    get_ingredients,
    is_balanced,
)


def _chain(*names):
    """Right-leaning chain built by hand, bypassing the balancing builder."""
    nodes = create_ingredient_nodes(Ingredient(n) for n in names)
    for parent, child in zip(nodes, nodes[1:]):
        parent.right = child
    return nodes[0]


def test_depth_of_empty_and_single():
    assert get_depth(None) == 0
    assert get_depth(IngredientNode(Ingredient("Salt"))) == 1


def test_depth_and_balance_of_chain():
    root = _chain("A", "B", "C")
    assert get_depth(root) == 3
    assert not is_balanced(root)
    assert is_balanced(root.right.right)
    assert is_balanced(None)


def test_flatten_is_in_order():
    root = IngredientNode(
        Ingredient("Mint"),
        left=IngredientNode(Ingredient("Basil")),
        right=IngredientNode(Ingredient("Thyme"), left=IngredientNode(Ingredient("Sage"))),
    )
    assert [i.name for i in get_ingredients(root)] == ["Basil", "Mint", "Sage", "Thyme"]
    assert get_ingredients(None) == []


def test_find_is_case_insensitive():
    root = _chain("Anise", "Basil", "Cumin")
    node = find_ingredient(Ingredient("CUMIN"), root)
    assert node is root.right.right
    assert node.name == "Cumin"
    assert find_ingredient(Ingredient("Dill"), root) is None
    assert find_ingredient(None, root) is None
    assert find_ingredient(Ingredient("Anise"), None) is None


def test_tree_len_and_contains():
    tree = IngredientTree(root=_chain("Anise", "Basil", "Cumin"))
    assert len(tree) == 3
    assert Ingredient("basil") in tree
    assert "Basil" not in tree
    assert len(IngredientTree()) == 0
