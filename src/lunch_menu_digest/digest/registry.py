from __future__ import annotations

import datetime
from typing import Optional

from lunch_menu_digest.core.config import BLAVATNIK_ENABLED, SCHWARZMAN_ENABLED
from lunch_menu_digest.core.constants import BLAVATNIK_NAME, SCHWARZMAN_NAME
from lunch_menu_digest.sources.base import MenuSource
from lunch_menu_digest.sources.blavatnik import build_blavatnik_cache, build_blavatnik_source
from lunch_menu_digest.sources.cohen_quad import build_cohen_quad_source
from lunch_menu_digest.sources.schwarzman import build_schwarzman_cache, build_schwarzman_source
from lunch_menu_digest.storage import WeeklyCache
from lunch_menu_digest.storage.weekly_cache import NowFunc


def build_default_caches(now_provider: NowFunc = datetime.datetime.now) -> dict[str, WeeklyCache]:
    """Weekly caches for the enabled image sources; `now_provider` decides which week is current."""
    caches: dict[str, WeeklyCache] = {}
    if SCHWARZMAN_ENABLED:
        caches[SCHWARZMAN_NAME] = build_schwarzman_cache(now_provider=now_provider)
    if BLAVATNIK_ENABLED:
        caches[BLAVATNIK_NAME] = build_blavatnik_cache(now_provider=now_provider)
    return caches


def build_default_sources(caches: Optional[dict[str, WeeklyCache]] = None) -> list[MenuSource]:
    """Sources in digest order: Cohen Quad, Schwarzman, Blavatnik."""
    caches = caches if caches is not None else build_default_caches()
    sources = [build_cohen_quad_source()]
    if SCHWARZMAN_NAME in caches:
        sources.append(build_schwarzman_source(caches[SCHWARZMAN_NAME]))
    if BLAVATNIK_NAME in caches:
        sources.append(build_blavatnik_source(caches[BLAVATNIK_NAME]))
    return sources
