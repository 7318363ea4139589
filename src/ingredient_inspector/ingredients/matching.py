"""Watchlist matching against free-text ingredient listings."""

from typing import Iterator, List, Sequence, Tuple

from ingredient_inspector.ingredients.aliases import synonyms
from ingredient_inspector.ingredients.models import WatchlistHit


def _iter_hits(
    ingredients_text: str, watchlist: Sequence[str]
) -> Iterator[Tuple[str, str]]:
    """Yield ``(entry, term)`` for every watchlist entry present in the text.

    The text is lowercased once. Each entry is searched through its full
    alias expansion and the first term found wins; the remaining synonyms
    for that entry are not checked. Matching is plain substring containment,
    so "egg" also matches "eggplant".
    """
    if not watchlist:
        return
    ingredients_lower = ingredients_text.lower()
    if not ingredients_lower.strip():
        return

    for entry in watchlist:
        for term in synonyms(entry):
            if term in ingredients_lower:
                yield entry, term
                break


def match(ingredients_text: str, watchlist: Sequence[str]) -> List[str]:
    """Return the watchlist entries found in an ingredient listing.

    Args:
        ingredients_text: Ingredient text as printed on the product
        watchlist: Watchlist entries in display order; duplicates allowed

    Returns:
        Matched entries in their original casing, in watchlist order. A
        duplicated entry is evaluated (and reported) once per occurrence.

    Examples:
        >>> match("contains high fructose corn syrup", ["sugar"])
        ['sugar']
        >>> match("PALM OIL is bad", ["Palm Oil", "Aspartame"])
        ['Palm Oil']
    """
    return [entry for entry, _ in _iter_hits(ingredients_text, watchlist)]


def explain_matches(
    ingredients_text: str, watchlist: Sequence[str]
) -> List[WatchlistHit]:
    """Like ``match`` but also report which alias term confirmed each entry.

    Args:
        ingredients_text: Ingredient text as printed on the product
        watchlist: Watchlist entries in display order

    Returns:
        One WatchlistHit per matched entry, in watchlist order
    """
    return [
        WatchlistHit(entry, term)
        for entry, term in _iter_hits(ingredients_text, watchlist)
    ]


def split_ingredients(ingredients_text: str) -> List[str]:
    """Split an ingredient listing on commas for display.

    This is a display helper only; matching always runs on the full text.

    Examples:
        >>> split_ingredients("water,  sugar , , salt")
        ['water', 'sugar', 'salt']
    """
    items = (item.strip() for item in ingredients_text.split(","))
    return [item for item in items if item]
