from lunch_menu_digest.core.constants import DAYS, MENU_WEEKDAYS, SCHWARZMAN_SKIP_CATEGORIES


def test_days_follow_python_weekday_order() -> None:
    assert DAYS[0] == "Monday"
    assert DAYS[6] == "Sunday"
    assert MENU_WEEKDAYS == DAYS[:5]


def test_schwarzman_skip_categories_are_lowercase() -> None:
    assert "toppings" in SCHWARZMAN_SKIP_CATEGORIES
    assert "sauces & pickles" in SCHWARZMAN_SKIP_CATEGORIES
    assert all(c == c.lower() for c in SCHWARZMAN_SKIP_CATEGORIES)
