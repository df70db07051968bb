from __future__ import annotations

import datetime
from typing import Any, Optional, Sequence

from lunch_menu_digest.core.config import BLAVATNIK_EMAIL_SUBJECT, BLAVATNIK_MENU_PATH
from lunch_menu_digest.core.constants import (
    BLAVATNIK_FIELDS,
    BLAVATNIK_INFO,
    BLAVATNIK_NAME,
    FALLBACK_LABEL,
    MENU_WEEKDAYS,
)
from lunch_menu_digest.models import BlavatnikMenu
from lunch_menu_digest.processing.menu_refresh import ImageMenuRefresher
from lunch_menu_digest.processing.prompts import BLAVATNIK_PROMPT
from lunch_menu_digest.sources.base import MenuSource
from lunch_menu_digest.storage import WeeklyCache, resolve_day
from lunch_menu_digest.storage.weekly_cache import NowFunc
from lunch_menu_digest.utils import clean_text_ws, strip_calories


def format_day_menu(day_menu: Any, *, drop_calories: bool = False) -> list[str]:
    """`{meat, veg, side}` becomes a numbered list; a plain list becomes bullets."""
    def _clean(value: Any) -> str:
        text = clean_text_ws(value) if isinstance(value, str) else ""
        return strip_calories(text) if drop_calories else text

    lines: list[str] = []
    if isinstance(day_menu, dict):
        for idx, key in enumerate(BLAVATNIK_FIELDS, start=1):
            text = _clean(day_menu.get(key))
            if text:
                lines.append(f"{idx}. {text}")
    elif isinstance(day_menu, list):
        for item in day_menu:
            text = _clean(item)
            if text:
                lines.append(f"• {text}")
    return lines


def is_valid_blavatnik_menu(menu: BlavatnikMenu, weekdays: Sequence[str] = MENU_WEEKDAYS) -> bool:
    return any(format_day_menu(menu.get(day)) for day in weekdays)


class BlavatnikFetcher:
    def __init__(
        self,
        cache: WeeklyCache,
        *,
        weekdays: Sequence[str] = MENU_WEEKDAYS,
        drop_calories: bool = False,
    ) -> None:
        self._cache = cache
        self._weekdays = tuple(weekdays)
        self._drop_calories = drop_calories

    def _format(self, day_menu: Any) -> list[str]:
        return format_day_menu(day_menu, drop_calories=self._drop_calories)

    def lines_for(self, menu: BlavatnikMenu, today: str) -> list[str]:
        resolved = resolve_day(
            menu,
            today,
            self._weekdays,
            has_content=lambda day_menu: bool(self._format(day_menu)),
        )
        if resolved is None:
            return []
        lines = self._format(resolved.content)
        if resolved.day != today:
            return [FALLBACK_LABEL.format(day=resolved.day), *lines]
        return lines

    def __call__(self, today: str) -> list[str]:
        menu = self._cache.read()
        if not menu:
            return []
        return self.lines_for(menu, today)


def build_blavatnik_cache(
    path: Optional[str] = None,
    *,
    now_provider: NowFunc = datetime.datetime.now,
    **kwargs,
) -> WeeklyCache:
    refresher = ImageMenuRefresher(
        source_name=BLAVATNIK_NAME,
        subject=BLAVATNIK_EMAIL_SUBJECT,
        prompt=BLAVATNIK_PROMPT,
        validate=is_valid_blavatnik_menu,
        **kwargs,
    )
    return WeeklyCache(
        path or BLAVATNIK_MENU_PATH,
        refresh=refresher,
        validate=is_valid_blavatnik_menu,
        now_provider=now_provider,
    )


def build_blavatnik_source(cache: Optional[WeeklyCache] = None) -> MenuSource:
    return MenuSource(
        name=BLAVATNIK_NAME,
        info=BLAVATNIK_INFO,
        fetch=BlavatnikFetcher(cache or build_blavatnik_cache()),
    )
