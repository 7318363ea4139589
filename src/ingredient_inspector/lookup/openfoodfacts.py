"""Open Food Facts product lookup by barcode."""

import logging
import urllib.parse
from typing import Any, Optional

import requests

from ingredient_inspector.exceptions import (
    LookupTransportError,
    MalformedResponseError,
    ProductNotFoundError,
)
from ingredient_inspector.ingredients.models import NovaScore, ProductRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://world.openfoodfacts.org"
DEFAULT_USER_AGENT = "ingredient-inspector/0.1.0"

NAME_NOT_FOUND = "Name not found"
NO_INGREDIENTS = "No ingredients listed."


def _text_field(product: dict, field: str, default: str) -> str:
    """Return a product field as text, or ``default`` if it is missing or empty.

    Whitespace is kept as is, so a blank listing stays blank.
    """
    value = product.get(field)
    if value is None or value == "":
        return default
    return str(value)


def parse_product(payload: Any, barcode: str = "") -> ProductRecord:
    """Build a ProductRecord from a v2 product API response body.

    Args:
        payload: Decoded JSON body
        barcode: Barcode the request was made for, kept on the record

    Returns:
        ProductRecord with defaults filled in for any missing field

    Raises:
        MalformedResponseError: If the body is not a JSON object
        ProductNotFoundError: If ``status`` is not 1 or ``product`` is missing

    Example:
        >>> parse_product({"status": 1, "product": {"nova_group": 4}}).nova_score
        <NovaScore.FOUR: '4'>
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            barcode, f"Expected a JSON object, got {type(payload).__name__}"
        )

    product = payload.get("product")
    if payload.get("status") != 1 or product is None:
        raise ProductNotFoundError(barcode, f"No product found for barcode {barcode}")
    if not isinstance(product, dict):
        raise MalformedResponseError(
            barcode, f"Expected 'product' to be an object, got {type(product).__name__}"
        )

    return ProductRecord(
        product_name=_text_field(product, "product_name", NAME_NOT_FOUND),
        image_url=_text_field(product, "image_front_url", ""),
        nova_score=NovaScore.parse(product.get("nova_group")),
        ingredients_text=_text_field(product, "ingredients_text", NO_INGREDIENTS),
        barcode=barcode,
    )


class OpenFoodFactsClient:
    """A requests session for single product lookups.

    Each call to ``fetch_product`` makes exactly one request. Nothing is
    retried or cached; failures are raised to the caller.

    Attributes:
        session: The underlying requests session
        base_url: Root URL of the Open Food Facts instance
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Root URL of the Open Food Facts instance
            user_agent: User agent string sent with every request
            timeout: Request timeout in seconds
            session: Existing session to reuse, mainly for tests
        """
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def product_url(self, barcode: str) -> str:
        quoted = urllib.parse.quote(barcode, safe="")
        return f"{self.base_url}/api/v2/product/{quoted}.json"

    def fetch_product(self, barcode: str) -> ProductRecord:
        """Look up a scanned barcode.

        Args:
            barcode: Barcode string as read by the scanner

        Returns:
            The product's record

        Raises:
            ValueError: If ``barcode`` is blank
            ProductNotFoundError: If the database has no such product
            MalformedResponseError: If the response is not a product document
            LookupTransportError: On connection errors, timeouts, invalid
                request settings and HTTP error statuses other than 404
        """
        barcode = barcode.strip()
        if not barcode:
            raise ValueError("Barcode must not be empty")

        url = self.product_url(barcode)
        logger.info(f"Fetching data for barcode: {barcode}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise LookupTransportError(barcode, f"Request to {url} failed: {e}") from e
        except ValueError as e:
            # urllib3 rejects bad request settings such as a zero timeout
            raise LookupTransportError(barcode, f"Request to {url} failed: {e}") from e

        # The v2 API answers unknown barcodes with 404 and a status 0 body
        if response.status_code == 404:
            raise ProductNotFoundError(barcode, f"No product found for barcode {barcode}")
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise LookupTransportError(barcode, str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                barcode, f"Response from {url} is not JSON: {e}"
            ) from e

        product = parse_product(payload, barcode)
        logger.debug(f"Found '{product.product_name}' for barcode {barcode}")
        return product
