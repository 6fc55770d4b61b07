"""
Pytest configuration and fixtures.
"""

import pytest

from src.flavor_pairer.catalog.catalog import IngredientCatalog
from src.flavor_pairer.tree.builder import construct_ingredient_tree


ZUCCHINI_PAIRINGS = {
    "Zucchini": ["Basil", "Garlic", "Tomato", "Lemon", "Parmesan", "Mint"],
    "Tomato": ["Basil", "Garlic", "Olive Oil", "Mozzarella", "Bacon"],
    "Basil": ["Garlic", "Parmesan", "Lemon", "Mozzarella"],
    "Garlic": ["Olive Oil", "Lemon", "Parmesan"],
    "Lemon": ["Mint", "Olive Oil"],
    "Parmesan": ["Bacon"],
    "Bacon": ["Egg"],
    "Egg": ["Parmesan"],
    "Mint": ["Lamb"],
    "Vanilla": [],
}


@pytest.fixture
def triangle_catalog():
    """A<->B<->C<->A plus an isolated D."""
    return IngredientCatalog.from_mapping(
        {"A": ["B", "C"], "B": ["A", "C"], "C": ["A", "B"], "D": []},
        symmetric=False,
    )


@pytest.fixture
def triangle_tree(triangle_catalog):
    return construct_ingredient_tree(triangle_catalog.ingredients)


@pytest.fixture
def kitchen_catalog():
    return IngredientCatalog.from_mapping(ZUCCHINI_PAIRINGS)


@pytest.fixture
def pairing_csv(tmp_path):
    path = tmp_path / "pairings.csv"
    lines = ["ingredient,pairing"]
    for name, pairings in ZUCCHINI_PAIRINGS.items():
        if not pairings:
            lines.append(f"{name},")
        for p in pairings:
            lines.append(f"{name},{p}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class _FakeResponse:
    def __init__(self, data):
        self.data = data


class _FakeQuery:
    def __init__(self, rows):
        self._rows = rows
        self._start = 0
        self._end = None

    def select(self, columns):
        self.columns = columns
        return self

    def range(self, start, end):
        self._start = start
        self._end = end
        return self

    def execute(self):
        end = len(self._rows) if self._end is None else self._end + 1
        return _FakeResponse(self._rows[self._start:end])


class FakeSupabaseClient:
    """Minimal stand-in for supabase.Client supporting table().select().range().execute()."""

    def __init__(self, tables):
        self.tables = tables
        self.calls = []

    def table(self, name):
        self.calls.append(name)
        return _FakeQuery(self.tables.get(name, []))


@pytest.fixture
def supabase_factory():
    return FakeSupabaseClient


@pytest.fixture
def fake_supabase():
    return FakeSupabaseClient(
        {
            "ingredients": [
                {"id": 1, "name": "Tomato"},
                {"id": 2, "name": "Basil"},
                {"id": 3, "name": "Garlic"},
                {"id": 4, "name": "Saffron"},
            ],
            "ingredient_pairings": [
                {"ingredient_id": 1, "paired_ingredient_id": 2},
                {"ingredient_id": 2, "paired_ingredient_id": 3},
            ],
        }
    )
