from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from lunch_menu_digest.core.constants import (
    BULLET_CHAR,
    DAYS,
    HEADING_LENGTH_THRESHOLD,
    LIST_KINDS,
    PARAGRAPH_KIND,
    SECTION_HEADING_KIND,
    SKIP_LINE_PATTERN,
    SKIP_SECTION_PATTERN,
    SUBHEADING_KINDS,
)
from lunch_menu_digest.scrapers.document import ContentNode
from lunch_menu_digest.utils import clean_text_ws, match_day_prefix, normalize_item_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifierConfig:
    skip_section_pattern: Optional[str] = SKIP_SECTION_PATTERN
    skip_line_pattern: Optional[str] = SKIP_LINE_PATTERN
    heading_length_threshold: int = HEADING_LENGTH_THRESHOLD
    weekdays: tuple[str, ...] = DAYS
    heading_kinds: tuple[str, ...] = SUBHEADING_KINDS
    list_kinds: tuple[str, ...] = LIST_KINDS

    def is_skip_section(self, heading: str) -> bool:
        if not self.skip_section_pattern:
            return False
        return re.fullmatch(self.skip_section_pattern, heading, flags=re.IGNORECASE) is not None

    def is_skip_line(self, text: str) -> bool:
        if not self.skip_line_pattern:
            return False
        return re.search(self.skip_line_pattern, text, flags=re.IGNORECASE) is not None


DEFAULT_CLASSIFIER_CONFIG = ClassifierConfig()


def format_heading(text: str) -> str:
    # leading newline renders as a paragraph break in the digest
    return f"\n*{text}*"


def format_bullet(text: str) -> str:
    return f"• {text}"


def is_implicit_heading(
    text: str,
    next_kind: Optional[str],
    config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG,
) -> bool:
    """Decide whether a paragraph is standing in for a heading.

    The page uses `<p>` both for prose and for sub-headings, so a paragraph
    counts as a heading only when it is short, carries no bullet, is not a
    day-prefixed entry, and is directly followed by a list.
    """
    if not text:
        return False
    if len(text) >= config.heading_length_threshold:
        return False
    if BULLET_CHAR in text:
        return False
    day, _ = match_day_prefix(text, config.weekdays)
    if day is not None:
        return False
    return next_kind in config.list_kinds


class SectionExtractor:
    def __init__(self, heading_kind: str = SECTION_HEADING_KIND) -> None:
        self._heading_kind = heading_kind

    def find_anchor(self, nodes: Sequence[ContentNode], section_name: str) -> Optional[ContentNode]:
        for node in nodes:
            if node.kind != self._heading_kind:
                continue
            if section_name in clean_text_ws(node.text):
                return node
        return None

    def extract(self, nodes: Sequence[ContentNode], section_name: str) -> list[ContentNode]:
        """Nodes after the first heading containing `section_name`, up to the next same-level heading."""
        anchor = self.find_anchor(nodes, section_name)
        if anchor is None:
            logger.info("section_not_found: %s", section_name)
            return []
        section: list[ContentNode] = []
        node = anchor.next_sibling()
        while node is not None and node.kind != anchor.kind:
            section.append(node)
            node = node.next_sibling()
        return section


class NodeClassifier:
    def __init__(self, config: ClassifierConfig = DEFAULT_CLASSIFIER_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    def classify(self, nodes: Sequence[ContentNode], today: str) -> list[str]:
        cfg = self._config
        lines: list[str] = []
        skipping = False
        for node in nodes:
            kind = node.kind
            if kind in cfg.heading_kinds or kind == PARAGRAPH_KIND:
                raw = (node.text or "").strip()
                text = clean_text_ws(raw)
                if not text:
                    continue
                nxt = node.next_sibling()
                next_kind = nxt.kind if nxt is not None else None
                if kind in cfg.heading_kinds or is_implicit_heading(text, next_kind, cfg):
                    skipping = cfg.is_skip_section(text)
                    if skipping:
                        logger.debug("skip_section: %s", text)
                    else:
                        lines.append(format_heading(text))
                    continue
                if skipping or cfg.is_skip_line(text):
                    continue
                # prose keeps its own line breaks
                lines.append(raw)
            elif kind in cfg.list_kinds:
                if skipping:
                    continue
                lines.extend(self._list_lines(node, today))
        return lines

    def _list_lines(self, node: ContentNode, today: str) -> list[str]:
        out: list[str] = []
        for item in node.children():
            text = clean_text_ws(item.text)
            if not text:
                continue
            day, remainder = match_day_prefix(text, self._config.weekdays)
            if day is not None and day != today:
                continue
            item_text = normalize_item_text(remainder)
            if item_text:
                out.append(format_bullet(item_text))
        return out


def parse_menu_section(
    nodes: Sequence[ContentNode],
    section_name: str,
    today: str,
    *,
    extractor: Optional[SectionExtractor] = None,
    classifier: Optional[NodeClassifier] = None,
) -> list[str]:
    section = (extractor or SectionExtractor()).extract(nodes, section_name)
    if not section:
        return []
    return (classifier or NodeClassifier()).classify(section, today)
