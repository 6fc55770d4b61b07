# src/flavor_pairer/errors.py
from __future__ import annotations

"""
errors.py

Purpose:
    Exceptions raised by the catalog, tree and ranking layers.

    Invalid arguments (None / empty inputs) are reported with the built-in
    ValueError; the classes here cover the conditions that carry an
    ingredient identity or a data-source problem.
"""

from typing import Any, Dict, Optional


class FlavorPairerError(Exception):
    """Base exception for flavor pairer errors."""

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        self.message = message
        self.name = name
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for logging and API responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "name": self.name,
        }


class DuplicateIngredientError(FlavorPairerError, RuntimeError):
    """Two ingredients with the same (case-insensitive) name reached the tree."""

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate ingredient: {name}", name=name)


class IngredientNotFoundError(FlavorPairerError, KeyError):
    """An ingredient name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown ingredient: {name}", name=name)

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.message


class CatalogLoadError(FlavorPairerError):
    """A catalog source returned data that cannot be turned into ingredients."""
