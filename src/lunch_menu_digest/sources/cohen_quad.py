from __future__ import annotations

from typing import Callable, Optional

from lunch_menu_digest.core.config import EXETER_MENU_URL, EXETER_SECTION_NAME
from lunch_menu_digest.core.constants import COHEN_QUAD_INFO, COHEN_QUAD_NAME
from lunch_menu_digest.scrapers.document import parse_document
from lunch_menu_digest.scrapers.page_fetcher import fetch_page_html
from lunch_menu_digest.scrapers.section_parser import NodeClassifier, SectionExtractor, parse_menu_section
from lunch_menu_digest.sources.base import MenuSource


class CohenQuadFetcher:
    """Dakota Café lines scraped from the Exeter College "today's menus" page."""

    def __init__(
        self,
        *,
        url: str = EXETER_MENU_URL,
        section_name: str = EXETER_SECTION_NAME,
        fetch_html: Optional[Callable[[str], str]] = None,
        extractor: Optional[SectionExtractor] = None,
        classifier: Optional[NodeClassifier] = None,
    ) -> None:
        self._url = url
        self._section_name = section_name
        self._fetch_html = fetch_html or fetch_page_html
        self._extractor = extractor or SectionExtractor()
        self._classifier = classifier or NodeClassifier()

    def parse(self, html: str, today: str) -> list[str]:
        nodes = parse_document(html)
        return parse_menu_section(
            nodes,
            self._section_name,
            today,
            extractor=self._extractor,
            classifier=self._classifier,
        )

    def __call__(self, today: str) -> list[str]:
        # fetch errors propagate; the aggregator drops this source for the day
        return self.parse(self._fetch_html(self._url), today)


def build_cohen_quad_source(**kwargs) -> MenuSource:
    return MenuSource(name=COHEN_QUAD_NAME, info=COHEN_QUAD_INFO, fetch=CohenQuadFetcher(**kwargs))
