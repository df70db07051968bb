from __future__ import annotations

from typing import Optional, Protocol, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag


class ContentNode(Protocol):
    """Read-only view of one document element with access to its next sibling."""

    @property
    def kind(self) -> str: ...

    @property
    def text(self) -> str: ...

    def next_sibling(self) -> Optional["ContentNode"]: ...

    def children(self) -> Sequence["ContentNode"]: ...


class HtmlNode:
    """`ContentNode` backed by a BeautifulSoup tag."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"HtmlNode(<{self.kind}>)"

    @property
    def kind(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def next_sibling(self) -> Optional["HtmlNode"]:
        sib = self._tag.find_next_sibling()
        return HtmlNode(sib) if isinstance(sib, Tag) else None

    def children(self) -> list["HtmlNode"]:
        return [HtmlNode(li) for li in self._tag.find_all("li", recursive=False)]


def parse_document(html: str) -> list[HtmlNode]:
    """Parse markup into every element in document order.

    Section headings can sit under any parent (per-section wrappers, a
    footer with its own headings), so nothing is pre-filtered here; the
    extractor picks the first matching heading and walks its own siblings.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    return [HtmlNode(tag) for tag in soup.find_all(True)]
