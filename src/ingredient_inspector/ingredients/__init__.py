"""Alias expansion and watchlist matching."""

from .aliases import ALIAS_LOOKUP, ALIAS_MAP, canonical_name, expand, synonyms
from .matching import explain_matches, match, split_ingredients
from .models import NovaScore, ProductRecord, WatchlistHit

__all__ = [
    "ALIAS_MAP",
    "ALIAS_LOOKUP",
    "expand",
    "synonyms",
    "canonical_name",
    "match",
    "explain_matches",
    "split_ingredients",
    "NovaScore",
    "ProductRecord",
    "WatchlistHit",
]
