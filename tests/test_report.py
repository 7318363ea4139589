import pytest

from ingredient_inspector.ingredients.models import NovaScore, ProductRecord
from ingredient_inspector.report import (
    alert_summary,
    format_report,
    from_result_params,
    nova_label,
    to_result_params,
)

PRODUCT = ProductRecord(
    product_name="Cola",
    image_url="https://images.example.org/cola.jpg",
    nova_score=NovaScore.FOUR,
    ingredients_text="carbonated water, sugar, colour (caramel e150d)",
)


def test_to_result_params_is_flat_strings():
    params = to_result_params(PRODUCT)
    assert params == {
        "productName": "Cola",
        "imageUrl": "https://images.example.org/cola.jpg",
        "novaScore": "4",
        "ingredients": "carbonated water, sugar, colour (caramel e150d)",
    }
    assert all(isinstance(value, str) for value in params.values())


def test_result_params_round_trip():
    assert from_result_params(to_result_params(PRODUCT)) == PRODUCT


def test_from_result_params_defaults():
    product = from_result_params({})
    assert product.product_name == "Product Not Found"
    assert product.image_url == ""
    assert product.nova_score is NovaScore.UNKNOWN
    assert product.ingredients_text == "No ingredients listed."


@pytest.mark.parametrize(
    "score, label",
    [
        (NovaScore.ONE, "NOVA 1: Unprocessed"),
        (NovaScore.TWO, "NOVA 2: Processed"),
        (NovaScore.THREE, "NOVA 3: Processed"),
        (NovaScore.FOUR, "NOVA 4: Ultra-Processed"),
        (NovaScore.UNKNOWN, "NOVA Score Not Found"),
    ],
)
def test_nova_label(score, label):
    assert nova_label(score) == label


def test_alert_summary():
    assert alert_summary([])[0] == "All Clear!"
    assert alert_summary(["Palm Oil", "sugar"]) == [
        "Warning!",
        "Found: Palm Oil, sugar",
    ]


def test_format_report():
    report = format_report(PRODUCT, ["sugar"])
    lines = report.splitlines()
    assert lines[:2] == ["Warning!", "Found: sugar"]
    assert "Cola" in lines
    assert "NOVA 4: Ultra-Processed" in lines
    assert "Image: https://images.example.org/cola.jpg" in lines
    assert lines[-3:] == [
        "  • carbonated water",
        "  • sugar",
        "  • colour (caramel e150d)",
    ]


def test_format_report_without_image():
    product = from_result_params({"productName": "Water", "ingredients": "water"})
    report = format_report(product, [])
    assert "Image:" not in report
    assert report.startswith("All Clear!")
