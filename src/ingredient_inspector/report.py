"""Results handoff and text rendering of a scanned product."""

from typing import Dict, List, Mapping, Sequence

from ingredient_inspector.ingredients import NovaScore, ProductRecord, split_ingredients
from ingredient_inspector.lookup import NO_INGREDIENTS

PRODUCT_NOT_FOUND = "Product Not Found"

NOVA_LABELS = {
    NovaScore.ONE: "NOVA 1: Unprocessed",
    NovaScore.TWO: "NOVA 2: Processed",
    NovaScore.THREE: "NOVA 3: Processed",
    NovaScore.FOUR: "NOVA 4: Ultra-Processed",
    NovaScore.UNKNOWN: "NOVA Score Not Found",
}


def to_result_params(product: ProductRecord) -> Dict[str, str]:
    """Flatten a product into the string parameters the results view takes."""
    return {
        "productName": product.product_name,
        "imageUrl": product.image_url,
        "novaScore": product.nova_score.value,
        "ingredients": product.ingredients_text,
    }


def from_result_params(params: Mapping[str, str]) -> ProductRecord:
    """Rebuild a product from results-view parameters, filling in defaults."""
    return ProductRecord(
        product_name=params.get("productName") or PRODUCT_NOT_FOUND,
        image_url=params.get("imageUrl") or "",
        nova_score=NovaScore.parse(params.get("novaScore")),
        ingredients_text=params.get("ingredients") or NO_INGREDIENTS,
    )


def nova_label(score: NovaScore) -> str:
    return NOVA_LABELS[score]


def alert_summary(matches: Sequence[str]) -> List[str]:
    """Return the title and body lines of the watchlist alert box."""
    if not matches:
        return [
            "All Clear!",
            "This product does not contain any items from your watchlist.",
        ]
    return ["Warning!", f"Found: {', '.join(matches)}"]


def format_report(product: ProductRecord, matches: Sequence[str]) -> str:
    """Render a scanned product and its watchlist matches as plain text.

    Args:
        product: The scanned product
        matches: Watchlist entries found in the product's ingredients

    Returns:
        Multi-line report: alert box, product name, NOVA label, image URL
        when present, and one bullet per comma-separated ingredient
    """
    lines = alert_summary(matches)
    lines.append("")
    lines.append(product.product_name)
    lines.append(nova_label(product.nova_score))
    if product.image_url:
        lines.append(f"Image: {product.image_url}")
    lines.append("")
    lines.append("Ingredients:")
    lines.extend(f"  • {item}" for item in split_ingredients(product.ingredients_text))
    return "\n".join(lines)
