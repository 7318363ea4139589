"""Exceptions raised by ingredient_inspector."""


class IngredientInspectorError(Exception):
    """Base class for all ingredient_inspector errors."""


class ProductLookupError(IngredientInspectorError):
    """A barcode could not be resolved to a product record."""

    def __init__(self, barcode: str, message: str):
        super().__init__(message)
        self.barcode = barcode


class ProductNotFoundError(ProductLookupError):
    """The product database has no record for the barcode."""


class MalformedResponseError(ProductLookupError):
    """The product database answered with something that is not a product."""


class LookupTransportError(ProductLookupError):
    """The request failed before a usable response arrived."""


class WatchlistError(IngredientInspectorError):
    """Base class for watchlist storage and editing failures."""


class WatchlistDecodeError(WatchlistError):
    """A persisted watchlist document is not a JSON list of strings."""


class WatchlistNotLoadedError(WatchlistError):
    """The watchlist was mutated before it was loaded from storage."""


class WatchlistStorageError(WatchlistError):
    """The watchlist database could not be read or written."""
