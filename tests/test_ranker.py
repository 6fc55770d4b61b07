import pytest

from src.flavor_pairer.catalog.base import Ingredient
from src.flavor_pairer.catalog.catalog import IngredientCatalog
from src.flavor_pairer.ranking.ranker import PairingRank, compute_ingredient_pairing_level
from src.flavor_pairer.tree.builder import construct_ingredient_tree
from src.flavor_pairer.tree.node import IngredientTree


def _ranked(pairing_ranks):
    return [(pr.ingredient.name, pr.rank) for pr in pairing_ranks]


class TestInputs:
    def test_missing_inputs_return_none(self, triangle_catalog, triangle_tree):
        a = triangle_catalog.require("A")
        assert compute_ingredient_pairing_level(None, triangle_tree, 1) is None
        assert compute_ingredient_pairing_level(a, None, 1) is None
        assert compute_ingredient_pairing_level(a, IngredientTree(), 1) is None

    def test_unknown_ingredient_returns_empty(self, triangle_tree):
        assert compute_ingredient_pairing_level(Ingredient("Z"), triangle_tree, 2) == []

    @pytest.mark.parametrize("level", [0, -3])
    def test_level_below_one_rejected(self, triangle_catalog, triangle_tree, level):
        with pytest.raises(ValueError):
            compute_ingredient_pairing_level(triangle_catalog.require("A"), triangle_tree, level)

    def test_ingredient_without_pairings(self, triangle_catalog, triangle_tree):
        d = triangle_catalog.require("D")
        assert compute_ingredient_pairing_level(d, triangle_tree, 1) == []
        assert compute_ingredient_pairing_level(d, triangle_tree, 3) == []


class TestLevels:
    def test_level_one_is_direct_pairings(self, triangle_catalog, triangle_tree):
        ranks = compute_ingredient_pairing_level(triangle_catalog.require("A"), triangle_tree, 1)
        assert _ranked(ranks) == [("B", 0), ("C", 0)]
        assert all(pr.pairings == [] for pr in ranks)

    def test_level_one_matches_pairing_set(self, kitchen_catalog):
        tree = construct_ingredient_tree(kitchen_catalog.ingredients)
        zucchini = kitchen_catalog.require("Zucchini")
        ranks = compute_ingredient_pairing_level(zucchini, tree, 1)
        assert {pr.ingredient for pr in ranks} == set(zucchini.pairings)
        assert len(ranks) == len(zucchini.pairings)

    def test_level_two_triangle(self, triangle_catalog, triangle_tree):
        ranks = compute_ingredient_pairing_level(triangle_catalog.require("A"), triangle_tree, 2)
        # B and C reinforce each other and both point back at A
        assert _ranked(ranks) == [("B", 2), ("C", 2), ("A", 2)]
        assert [p.name for p in ranks[0].pairings] == ["A", "C"]

    def test_level_three_triangle(self, triangle_catalog, triangle_tree):
        ranks = compute_ingredient_pairing_level(triangle_catalog.require("A"), triangle_tree, 3)
        assert _ranked(ranks) == [("B", 2), ("C", 2), ("A", 2)]

    def test_sorted_by_rank_descending(self):
        catalog = IngredientCatalog.from_mapping(
            {"X": ["P", "Q"], "P": ["R"], "Q": ["R"], "R": []},
            symmetric=False,
        )
        tree = construct_ingredient_tree(catalog.ingredients)
        ranks = compute_ingredient_pairing_level(catalog.require("X"), tree, 2)
        assert _ranked(ranks) == [("R", 2), ("P", 0), ("Q", 0)]

    def test_rank_counts_frontier_at_scan_time(self):
        # R is scored before S joins the frontier, so S (which lists R) is not counted
        catalog = IngredientCatalog.from_mapping(
            {"Y": ["P"], "P": ["R", "S"], "S": ["R"], "R": []},
            symmetric=False,
        )
        tree = construct_ingredient_tree(catalog.ingredients)
        ranks = compute_ingredient_pairing_level(catalog.require("Y"), tree, 2)
        assert _ranked(ranks) == [("R", 1), ("S", 1), ("P", 0)]

    def test_pairing_outside_tree_is_skipped(self):
        catalog = IngredientCatalog.from_mapping({"E": ["X"]})
        tree = construct_ingredient_tree([catalog.require("E")])
        ranks = compute_ingredient_pairing_level(catalog.require("E"), tree, 2)
        assert _ranked(ranks) == [("X", 0)]
        assert [p.name for p in ranks[0].pairings] == ["E"]

    def test_calls_do_not_share_state(self, triangle_catalog, triangle_tree):
        a = triangle_catalog.require("A")
        compute_ingredient_pairing_level(a, triangle_tree, 3)
        ranks = compute_ingredient_pairing_level(a, triangle_tree, 1)
        assert _ranked(ranks) == [("B", 0), ("C", 0)]


def test_pairing_rank_to_dict():
    pr = PairingRank(Ingredient("Basil"), 3, [Ingredient("Tomato")])
    assert pr.to_dict() == {"ingredient": "Basil", "rank": 3, "pairings": ["Tomato"]}
