"""JSON encoding for the persisted watchlist document."""

import json
from typing import List, Sequence

from ingredient_inspector.exceptions import WatchlistDecodeError


def encode_watchlist(entries: Sequence[str]) -> str:
    """Encode watchlist entries as a JSON array of strings."""
    return json.dumps(list(entries), ensure_ascii=False)


def decode_watchlist(document: str) -> List[str]:
    """Decode a persisted watchlist document.

    The document is accepted whole or not at all; a single bad element
    rejects the entire list.

    Args:
        document: JSON text previously produced by ``encode_watchlist``

    Returns:
        The entries in stored order

    Raises:
        WatchlistDecodeError: If the document is not valid JSON or is not a
            list of strings
    """
    try:
        value = json.loads(document)
    except (TypeError, ValueError) as e:
        raise WatchlistDecodeError(f"Watchlist is not valid JSON: {e}") from e

    if not isinstance(value, list):
        raise WatchlistDecodeError(
            f"Watchlist must be a JSON list, got {type(value).__name__}"
        )
    if not all(isinstance(item, str) for item in value):
        raise WatchlistDecodeError("Watchlist entries must all be strings")
    return value
