from __future__ import annotations


class MenuDigestError(Exception):
    """Base class for errors raised inside the menu digest."""


class SourceUnavailable(MenuDigestError):
    """Upstream fetch or transport failure for a single menu source."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class MalformedCache(MenuDigestError):
    """A persisted weekly payload could not be parsed or has the wrong shape."""
