from __future__ import annotations

import datetime
from typing import Collection, Optional

from lunch_menu_digest.core.config import SCHWARZMAN_EMAIL_SUBJECT, SCHWARZMAN_MENU_PATH
from lunch_menu_digest.core.constants import (
    SCHWARZMAN_HEADER,
    SCHWARZMAN_INFO,
    SCHWARZMAN_NAME,
    SCHWARZMAN_SKIP_CATEGORIES,
)
from lunch_menu_digest.models import SchwarzmanMenu
from lunch_menu_digest.processing.menu_refresh import ImageMenuRefresher
from lunch_menu_digest.processing.prompts import SCHWARZMAN_PROMPT
from lunch_menu_digest.sources.base import MenuSource
from lunch_menu_digest.storage import WeeklyCache
from lunch_menu_digest.storage.weekly_cache import NowFunc
from lunch_menu_digest.utils import clean_text_ws


def format_schwarzman_menu(
    menu: SchwarzmanMenu,
    skip_categories: Collection[str] = SCHWARZMAN_SKIP_CATEGORIES,
) -> list[str]:
    lines = [SCHWARZMAN_HEADER]
    for category, items in menu.items():
        if not isinstance(items, list) or not items:
            continue
        if category.strip().lower() in skip_categories:
            continue
        lines.append("")
        lines.append(f"*{category}*")
        for item in items:
            text = clean_text_ws(item) if isinstance(item, str) else ""
            if text:
                lines.append(f"• {text}")
    return lines


def is_valid_schwarzman_menu(menu: SchwarzmanMenu) -> bool:
    return any(isinstance(items, list) and items for items in menu.values())


class SchwarzmanFetcher:
    """The board is the same all week, so the weekday is ignored."""

    def __init__(self, cache: WeeklyCache) -> None:
        self._cache = cache

    def __call__(self, today: str) -> list[str]:
        menu = self._cache.read()
        if not menu or not is_valid_schwarzman_menu(menu):
            return []
        return format_schwarzman_menu(menu)


def build_schwarzman_cache(
    path: Optional[str] = None,
    *,
    now_provider: NowFunc = datetime.datetime.now,
    **kwargs,
) -> WeeklyCache:
    refresher = ImageMenuRefresher(
        source_name=SCHWARZMAN_NAME,
        subject=SCHWARZMAN_EMAIL_SUBJECT,
        prompt=SCHWARZMAN_PROMPT,
        validate=is_valid_schwarzman_menu,
        **kwargs,
    )
    return WeeklyCache(
        path or SCHWARZMAN_MENU_PATH,
        refresh=refresher,
        validate=is_valid_schwarzman_menu,
        now_provider=now_provider,
    )


def build_schwarzman_source(cache: Optional[WeeklyCache] = None) -> MenuSource:
    return MenuSource(
        name=SCHWARZMAN_NAME,
        info=SCHWARZMAN_INFO,
        fetch=SchwarzmanFetcher(cache or build_schwarzman_cache()),
    )
