"""Scan-to-result flow: lookup, match against the watchlist, report."""

import dataclasses
import enum
import logging
from typing import List, Optional

from ingredient_inspector.exceptions import (
    LookupTransportError,
    MalformedResponseError,
    ProductNotFoundError,
)
from ingredient_inspector.ingredients import ProductRecord, match
from ingredient_inspector.lookup import OpenFoodFactsClient
from ingredient_inspector.watchlist import WatchlistEditor

logger = logging.getLogger(__name__)


class ScanError(enum.Enum):
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    NETWORK = "network"
    BUSY = "busy"


ERROR_MESSAGES = {
    ScanError.PERMISSION_DENIED: "No access to camera",
    ScanError.NOT_FOUND: "Product not found. Try a different item.",
    ScanError.MALFORMED: "Product not found. Try a different item.",
    ScanError.NETWORK: "An error occurred while fetching data.",
    ScanError.BUSY: "A scan is already in progress.",
}


@dataclasses.dataclass
class ScanOutcome:
    """Result of one scan: either a product with its matches, or an error."""

    barcode: str
    product: Optional[ProductRecord] = None
    matches: List[str] = dataclasses.field(default_factory=list)
    error: Optional[ScanError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """User-facing message for a failed scan."""
        return ERROR_MESSAGES[self.error] if self.error else None


class ScanSession:
    """Drives scans one at a time.

    While a lookup is outstanding the session is ``busy`` and further scans
    are rejected rather than queued. Every failure is turned into a
    ScanOutcome with a single message and the session is ready again
    afterwards; nothing is retried.

    Attributes:
        client: Product lookup client
        editor: Watchlist for the current session
        camera_permitted: Whether scanning is allowed at all
    """

    def __init__(
        self,
        client: OpenFoodFactsClient,
        editor: WatchlistEditor,
        camera_permitted: bool = True,
    ):
        self.client = client
        self.editor = editor
        self.camera_permitted = camera_permitted
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def ready(self) -> bool:
        """True when a new scan would be accepted."""
        return self.camera_permitted and not self._busy

    def grant_permission(self) -> None:
        self.camera_permitted = True

    def scan(self, barcode: str) -> ScanOutcome:
        """Look up ``barcode`` and check its ingredients against the watchlist.

        Args:
            barcode: Barcode string as read by the scanner

        Returns:
            ScanOutcome with the product and matched watchlist entries, or
            with ``error`` set and no product
        """
        if not self.camera_permitted:
            return ScanOutcome(barcode, error=ScanError.PERMISSION_DENIED)
        if not barcode.strip():
            logger.info("Ignoring scan with an empty barcode")
            return ScanOutcome(barcode, error=ScanError.NOT_FOUND)
        if self._busy:
            logger.warning(f"Ignoring scan of {barcode} while a lookup is running")
            return ScanOutcome(barcode, error=ScanError.BUSY)

        self._busy = True
        try:
            product = self.client.fetch_product(barcode)
        except ProductNotFoundError as e:
            logger.info(f"Lookup failed for {barcode}: {e}")
            return ScanOutcome(barcode, error=ScanError.NOT_FOUND)
        except MalformedResponseError as e:
            logger.warning(f"Malformed response for {barcode}: {e}")
            return ScanOutcome(barcode, error=ScanError.MALFORMED)
        except LookupTransportError as e:
            logger.error(f"Error fetching {barcode}: {e}")
            return ScanOutcome(barcode, error=ScanError.NETWORK)
        finally:
            self._busy = False

        return ScanOutcome(barcode, product=product, matches=self.check(product))

    def check(self, product: ProductRecord) -> List[str]:
        """Return the watchlist entries present in ``product``'s ingredients."""
        if not self.editor.loaded:
            self.editor.load()
        return match(product.ingredients_text, self.editor.entries)
