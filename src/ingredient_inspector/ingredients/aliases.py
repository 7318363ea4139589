"""Alias table mapping watchlist terms to the synonyms found on labels."""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# Keys and synonyms must be lowercase. Each group lists its key first.
_ALIAS_GROUPS = {
    "palm oil": [
        "palm oil",
        "palmolein",
        "palm kernel",
        "palm fruit",
        "palmitate",
        "elaeis guineensis",
    ],
    "sugar": [
        "sugar",
        "high fructose corn syrup",
        "corn syrup",
        "dextrose",
        "fructose",
        "sucrose",
        "maltose",
        "cane juice",
        "molasses",
    ],
    "msg": [
        "msg",
        "monosodium glutamate",
        "yeast extract",
        "glutamate",
        "hydrolyzed vegetable protein",
    ],
    "aspartame": ["aspartame", "nutrasweet", "equal", "e951"],
}

ALIAS_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {key: tuple(terms) for key, terms in _ALIAS_GROUPS.items()}
)

# Create reverse mapping for lookup
ALIAS_LOOKUP: Mapping[str, str] = MappingProxyType(
    {term: key for key, terms in ALIAS_MAP.items() for term in terms}
)


def _normalize_term(term: str) -> str:
    return term.lower()


def synonyms(term: str) -> Tuple[str, ...]:
    """Return the ordered synonyms for a watchlist term.

    Args:
        term: Watchlist term as the user typed it

    Returns:
        The alias group for ``term`` if it is a known key, otherwise a
        one-element tuple holding the lowercased term

    Examples:
        >>> synonyms("Aspartame")
        ('aspartame', 'nutrasweet', 'equal', 'e951')
        >>> synonyms("Carrageenan")
        ('carrageenan',)
    """
    key = _normalize_term(term)
    return ALIAS_MAP.get(key, (key,))


def expand(term: str) -> FrozenSet[str]:
    """Expand a watchlist term into every string that should match it.

    Only exact key matches are expanded. "Sugars" or "cane sugar" are not
    keys, so they come back as themselves.

    Args:
        term: Watchlist term; compared case-insensitively

    Returns:
        Set of lowercase search terms, always non-empty for non-empty input

    Examples:
        >>> "dextrose" in expand("Sugar")
        True
        >>> expand("Carrageenan")
        frozenset({'carrageenan'})
    """
    return frozenset(synonyms(term))


def canonical_name(term: str) -> str:
    """Return the alias key a synonym belongs to.

    Args:
        term: Any ingredient string

    Returns:
        The canonical key (e.g. "sugar" for "Dextrose"), or the lowercased
        term when it belongs to no group
    """
    key = _normalize_term(term)
    return ALIAS_LOOKUP.get(key, key)
