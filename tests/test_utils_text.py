from lunch_menu_digest.utils import clean_text_ws, match_day_prefix, normalize_item_text, strip_calories, strip_day_prefix


def test_clean_text_ws_collapses() -> None:
    assert clean_text_ws("  hello   world \n") == "hello world"
    assert clean_text_ws("Roast\n\t Chicken") == "Roast Chicken"


def test_strip_calories_dash_form() -> None:
    assert strip_calories("Tomato Soup — ~120kcal") == "Tomato Soup"
    assert strip_calories("Grilled Chicken - ~380 kcal") == "Grilled Chicken"
    assert strip_calories("Lentil Dhal – ~310KCAL") == "Lentil Dhal"


def test_strip_calories_paren_form_with_thousands() -> None:
    assert strip_calories("Fish Pie (~1,200 kcal)") == "Fish Pie"
    assert strip_calories("Fish Pie (~1,200 KCAL) with peas") == "Fish Pie with peas"


def test_strip_calories_keeps_unrelated_numbers() -> None:
    assert strip_calories("Pizza - 12 inch") == "Pizza - 12 inch"
    assert strip_calories("2 for 1 – 300g pasta") == "2 for 1 – 300g pasta"


def test_strip_calories_is_idempotent() -> None:
    for text in ["Tomato Soup — ~120kcal", "Fish Pie (~1,200 kcal) with peas", "Salad Bar", ""]:
        once = strip_calories(text)
        assert strip_calories(once) == once


def test_normalize_item_text_collapses_then_strips() -> None:
    assert normalize_item_text("  Veggie   Burger\n — ~390kcal ") == "Veggie Burger"


def test_match_day_prefix_accepts_dash_variants() -> None:
    assert match_day_prefix("Monday – Pasta") == ("Monday", "Pasta")
    assert match_day_prefix("Tuesday—Fish") == ("Tuesday", "Fish")
    assert match_day_prefix("Friday - Burger") == ("Friday", "Burger")


def test_match_day_prefix_is_case_sensitive_and_needs_dash() -> None:
    assert match_day_prefix("monday – Pasta") == (None, "monday – Pasta")
    assert match_day_prefix("Mondays are busy") == (None, "Mondays are busy")
    assert match_day_prefix("Salad Bar") == (None, "Salad Bar")


def test_strip_day_prefix() -> None:
    assert strip_day_prefix("Wednesday – Roast Chicken • Gravy") == "Roast Chicken • Gravy"
    assert strip_day_prefix("Soup of the Day") == "Soup of the Day"
