from lunch_menu_digest.storage import ResolvedDay, resolve_day

WEEK = ("Monday", "Tuesday", "Wednesday")


def test_today_with_content_needs_no_fallback() -> None:
    assert resolve_day({"Monday": ["x"], "Tuesday": ["y"]}, "Monday", WEEK) == ResolvedDay("Monday", ["x"])


def test_scans_forward_from_today() -> None:
    assert resolve_day({"Monday": [], "Tuesday": ["x"], "Wednesday": []}, "Monday", WEEK) == ResolvedDay(
        "Tuesday", ["x"]
    )


def test_wraps_to_earliest_day_when_rest_of_week_is_empty() -> None:
    assert resolve_day({"Monday": ["x"], "Tuesday": [], "Wednesday": []}, "Wednesday", WEEK) == ResolvedDay(
        "Monday", ["x"]
    )


def test_all_empty_returns_none() -> None:
    assert resolve_day({"Monday": [], "Tuesday": [], "Wednesday": []}, "Monday", WEEK) is None
    assert resolve_day({}, "Monday", WEEK) is None


def test_day_outside_week_scans_from_start() -> None:
    assert resolve_day({"Tuesday": ["x"], "Wednesday": ["y"]}, "Saturday", WEEK) == ResolvedDay("Tuesday", ["x"])


def test_custom_content_predicate() -> None:
    menu = {"Monday": {"meat": "", "veg": ""}, "Tuesday": {"meat": "Fish Pie"}}
    resolved = resolve_day(menu, "Monday", WEEK, has_content=lambda d: any((d or {}).values()))
    assert resolved == ResolvedDay("Tuesday", {"meat": "Fish Pie"})
