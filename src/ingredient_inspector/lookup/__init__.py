"""Product lookup against the Open Food Facts database."""

from .openfoodfacts import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    NAME_NOT_FOUND,
    NO_INGREDIENTS,
    OpenFoodFactsClient,
    parse_product,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "NAME_NOT_FOUND",
    "NO_INGREDIENTS",
    "OpenFoodFactsClient",
    "parse_product",
]
