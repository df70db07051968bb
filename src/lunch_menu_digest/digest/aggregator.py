from __future__ import annotations

import datetime
import logging
from typing import Optional, Sequence

from lunch_menu_digest.core.constants import DAYS, DIGEST_TITLE, MONTH_ABBREVIATIONS, NO_ITEMS_NOTICE
from lunch_menu_digest.core.errors import SourceUnavailable
from lunch_menu_digest.sources.base import MenuSource

logger = logging.getLogger(__name__)


def weekday_name(day: datetime.date) -> str:
    return DAYS[day.weekday()]


def format_date_label(day: datetime.date) -> str:
    # en-GB long form, e.g. "Monday 6 Oct 2025"
    return f"{weekday_name(day)} {day.day} {MONTH_ABBREVIATIONS[day.month - 1]} {day.year}"


class SourceAggregator:
    def __init__(
        self,
        sources: Sequence[MenuSource],
        *,
        title: str = DIGEST_TITLE,
        no_items_notice: str = NO_ITEMS_NOTICE,
    ) -> None:
        self._sources = list(sources)
        self._title = title
        self._no_items_notice = no_items_notice

    @property
    def sources(self) -> list[MenuSource]:
        return list(self._sources)

    def fetch_source(self, source: MenuSource, today: str) -> list[str]:
        """Lines from one source; any failure counts as an empty contribution."""
        try:
            lines = source.fetch(today)
        except SourceUnavailable as e:
            logger.warning("source_failed: %s (%s)", source.name, e)
            return []
        except Exception:
            logger.exception("source_failed: %s", source.name)
            return []
        return list(lines or [])

    def collect(self, today: str) -> list[tuple[MenuSource, list[str]]]:
        # sequential, so the output follows registration order
        blocks: list[tuple[MenuSource, list[str]]] = []
        for source in self._sources:
            lines = self.fetch_source(source, today)
            logger.info("source_done: %s lines=%s", source.name, len(lines))
            if lines:
                blocks.append((source, lines))
        return blocks

    def compose(self, today: str, date_label: str) -> str:
        msg = f"{self._title}\n📅 {date_label}\n"
        blocks = self.collect(today)
        for source, lines in blocks:
            msg += f"\n*--- {source.name} ---*\n"
            msg += f"{source.info}\n"
            msg += "\n".join(lines)
            msg += "\n"
        if not blocks:
            msg += f"\n{self._no_items_notice}"
        return msg


def get_todays_digest(
    now: Optional[datetime.datetime] = None,
    sources: Optional[Sequence[MenuSource]] = None,
) -> str:
    """Entry point for the delivery layer: today's digest text across all sources."""
    current = now or datetime.datetime.now()
    if sources is None:
        from lunch_menu_digest.digest.registry import build_default_caches, build_default_sources

        sources = build_default_sources(build_default_caches(now_provider=lambda: current))
    day = current.date()
    return SourceAggregator(sources).compose(weekday_name(day), format_date_label(day))
