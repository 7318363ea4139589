import dataclasses
import enum
from typing import Any


class NovaScore(enum.Enum):
    """NOVA food-processing group reported by Open Food Facts."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    UNKNOWN = "N/A"

    @classmethod
    def parse(cls, value: Any) -> "NovaScore":
        """Map a raw ``nova_group`` value (int, float or string) to a score."""
        if value is None or isinstance(value, bool):
            return cls.UNKNOWN
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        try:
            return cls(str(value).strip())
        except ValueError:
            return cls.UNKNOWN


@dataclasses.dataclass(frozen=True)
class ProductRecord:
    product_name: str
    image_url: str
    nova_score: NovaScore
    ingredients_text: str
    barcode: str = ""


@dataclasses.dataclass(frozen=True)
class WatchlistHit:
    entry: str  # watchlist entry, original casing
    term: str  # alias term found in the ingredient text
