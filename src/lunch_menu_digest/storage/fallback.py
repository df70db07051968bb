from __future__ import annotations

from typing import Any, Callable, Mapping, NamedTuple, Optional, Sequence

from lunch_menu_digest.core.constants import MENU_WEEKDAYS


class ResolvedDay(NamedTuple):
    day: str
    content: Any


def _non_empty(content: Any) -> bool:
    return bool(content)


def resolve_day(
    menu_by_weekday: Mapping[str, Any],
    today: str,
    weekdays: Sequence[str] = MENU_WEEKDAYS,
    has_content: Callable[[Any], bool] = _non_empty,
) -> Optional[ResolvedDay]:
    """Pick the day whose menu should be shown for `today`.

    Today wins when it has content. Otherwise the first later weekday with
    content is used, wrapping to the earliest weekday with content when the
    rest of the week is empty (so the result can point backwards). Returns
    None when no weekday has content at all.
    """
    content = menu_by_weekday.get(today)
    if has_content(content):
        return ResolvedDay(today, content)

    start = weekdays.index(today) + 1 if today in weekdays else 0
    for day in list(weekdays[start:]) + list(weekdays):
        content = menu_by_weekday.get(day)
        if has_content(content):
            return ResolvedDay(day, content)
    return None
