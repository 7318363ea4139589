import pytest

from ingredient_inspector.exceptions import (
    LookupTransportError,
    MalformedResponseError,
    ProductNotFoundError,
)
from ingredient_inspector.ingredients.models import NovaScore, ProductRecord
from ingredient_inspector.lookup import OpenFoodFactsClient
from ingredient_inspector.scanning import ScanError, ScanSession
from ingredient_inspector.watchlist import WatchlistEditor, WatchlistStore

BARCODE = "5000159407236"

PRODUCT = ProductRecord(
    product_name="Chocolate Spread",
    image_url="",
    nova_score=NovaScore.FOUR,
    ingredients_text="Sugar, vegetable oil (palm kernel), hazelnuts, salt",
    barcode=BARCODE,
)


@pytest.fixture
def store(tmp_path):
    store = WatchlistStore(tmp_path / "watchlist.db")
    store.save(["Palm Oil", "Aspartame", "sugar"])
    return store


@pytest.fixture
def client(mocker):
    client = OpenFoodFactsClient()
    mocker.patch.object(client, "fetch_product", return_value=PRODUCT)
    return client


@pytest.fixture
def session(client, store):
    return ScanSession(client, WatchlistEditor(store))


def test_scan_matches_product_against_watchlist(session):
    outcome = session.scan(BARCODE)
    assert outcome.ok
    assert outcome.message is None
    assert outcome.product == PRODUCT
    assert outcome.matches == ["Palm Oil", "sugar"]
    assert session.ready


def test_scan_loads_watchlist_once(session, store, mocker):
    fetch = mocker.spy(store, "fetch")
    session.scan(BARCODE)
    session.scan(BARCODE)
    fetch.assert_called_once()


def test_scan_uses_in_memory_watchlist(session):
    session.editor.load()
    session.editor.add("Salt")
    assert session.scan(BARCODE).matches == ["Salt", "Palm Oil", "sugar"]


@pytest.mark.parametrize(
    "error, expected_kind, expected_message",
    [
        (
            ProductNotFoundError(BARCODE, "no product"),
            ScanError.NOT_FOUND,
            "Product not found. Try a different item.",
        ),
        (
            MalformedResponseError(BARCODE, "not an object"),
            ScanError.MALFORMED,
            "Product not found. Try a different item.",
        ),
        (
            LookupTransportError(BARCODE, "connection refused"),
            ScanError.NETWORK,
            "An error occurred while fetching data.",
        ),
    ],
)
def test_scan_failures_become_outcomes(
    session, client, error, expected_kind, expected_message
):
    client.fetch_product.side_effect = error
    outcome = session.scan(BARCODE)
    assert not outcome.ok
    assert outcome.error is expected_kind
    assert outcome.product is None
    assert outcome.matches == []
    assert outcome.message == expected_message
    assert not session.busy
    assert session.ready


@pytest.mark.parametrize("barcode", ["", "   "])
def test_scan_blank_barcode_is_not_found(session, client, barcode):
    outcome = session.scan(barcode)
    assert outcome.error is ScanError.NOT_FOUND
    assert outcome.message == "Product not found. Try a different item."
    client.fetch_product.assert_not_called()
    assert session.ready


def test_scan_bad_request_settings_are_network_errors(store, mocker):
    client = OpenFoodFactsClient(timeout=0)
    mocker.patch.object(
        client.session,
        "get",
        side_effect=ValueError("Attempted to set connect timeout to 0"),
    )
    outcome = ScanSession(client, WatchlistEditor(store)).scan(BARCODE)
    assert outcome.error is ScanError.NETWORK
    assert outcome.message == "An error occurred while fetching data."


def test_scan_after_failure_succeeds(session, client):
    client.fetch_product.side_effect = [
        LookupTransportError(BARCODE, "timeout"),
        PRODUCT,
    ]
    assert session.scan(BARCODE).error is ScanError.NETWORK
    assert session.scan(BARCODE).ok
    assert client.fetch_product.call_count == 2


def test_scan_without_camera_permission(client, store):
    session = ScanSession(client, WatchlistEditor(store), camera_permitted=False)
    outcome = session.scan(BARCODE)
    assert outcome.error is ScanError.PERMISSION_DENIED
    assert outcome.message == "No access to camera"
    assert not session.ready
    client.fetch_product.assert_not_called()

    session.grant_permission()
    assert session.scan(BARCODE).ok


def test_scan_rejected_while_lookup_in_progress(session, client):
    nested = []

    def fetch_and_rescan(barcode):
        assert session.busy
        nested.append(session.scan("0000000000000"))
        return PRODUCT

    client.fetch_product.side_effect = fetch_and_rescan
    outcome = session.scan(BARCODE)

    assert outcome.ok
    assert len(nested) == 1
    assert nested[0].error is ScanError.BUSY
    assert client.fetch_product.call_count == 1
    assert not session.busy
