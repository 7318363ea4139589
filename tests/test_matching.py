import pytest

from ingredient_inspector.ingredients.matching import (
    explain_matches,
    match,
    split_ingredients,
)
from ingredient_inspector.ingredients.models import WatchlistHit


@pytest.mark.parametrize(
    "ingredients_text",
    ["", "water, sugar, salt", "PALM OIL"],
)
def test_empty_watchlist_matches_nothing(ingredients_text):
    assert match(ingredients_text, []) == []


@pytest.mark.parametrize("ingredients_text", ["", "   ", "\n\t"])
def test_blank_ingredients_match_nothing(ingredients_text):
    assert match(ingredients_text, ["sugar", "Palm Oil", "salt"]) == []


@pytest.mark.parametrize(
    "ingredients_text, watchlist, expected",
    [
        ("PALM OIL is bad", ["Palm Oil"], ["Palm Oil"]),
        ("contains high fructose corn syrup", ["sugar"], ["sugar"]),
        (
            "vegetable oil (palm kernel), water, salt",
            ["Palm Oil", "Aspartame"],
            ["Palm Oil"],
        ),
        ("sweetener (E951), water", ["aspartame"], ["aspartame"]),
        ("water, salt", ["Palm Oil", "sugar"], []),
        # Unaliased terms match on their own text
        ("Water, Carrageenan", ["carrageenan"], ["carrageenan"]),
        # Plain substring containment, no word boundaries
        ("grilled eggplant", ["egg"], ["egg"]),
    ],
)
def test_match(ingredients_text, watchlist, expected):
    assert match(ingredients_text, watchlist) == expected


def test_match_preserves_order_and_duplicates():
    text = "sugar, monosodium glutamate, salt"
    assert match(text, ["msg", "sugar", "msg"]) == ["msg", "sugar", "msg"]
    assert match(text, ["sugar", "Salt", "aspartame", "MSG"]) == [
        "sugar",
        "Salt",
        "MSG",
    ]


def test_match_reports_entry_once_when_several_synonyms_present():
    text = "sugar, dextrose, corn syrup, molasses"
    assert match(text, ["Sugar"]) == ["Sugar"]


def test_match_keeps_original_casing():
    assert match("contains MSG", ["Msg"]) == ["Msg"]


def test_match_is_idempotent():
    text = "palm fruit oil, sucrose"
    watchlist = ["sugar", "Palm Oil", "msg"]
    first = match(text, watchlist)
    assert match(text, watchlist) == first
    assert watchlist == ["sugar", "Palm Oil", "msg"]


def test_explain_matches_names_the_first_synonym_found():
    text = "water, corn syrup, yeast extract"
    hits = explain_matches(text, ["sugar", "MSG", "aspartame"])
    assert hits == [
        WatchlistHit("sugar", "corn syrup"),
        WatchlistHit("MSG", "yeast extract"),
    ]


def test_explain_matches_agrees_with_match():
    text = "palmolein, dextrose, aspartame"
    watchlist = ["Aspartame", "sugar", "salt", "palm oil"]
    assert [hit.entry for hit in explain_matches(text, watchlist)] == match(
        text, watchlist
    )


@pytest.mark.parametrize(
    "input_text, expected",
    [
        ("water, sugar, salt", ["water", "sugar", "salt"]),
        ("water,  sugar , , salt", ["water", "sugar", "salt"]),
        ("No ingredients listed.", ["No ingredients listed."]),
        ("", []),
    ],
)
def test_split_ingredients(input_text, expected):
    assert split_ingredients(input_text) == expected
