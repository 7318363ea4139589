"""Ingredient Inspector - check scanned products against an ingredient watchlist."""

__version__ = "0.1.0"

from . import database, ingredients, lookup, watchlist

__all__ = ["database", "ingredients", "lookup", "watchlist"]
