"""HTML page fetching and menu section parsing."""

__all__ = ["document", "page_fetcher", "page_fetcher_config", "section_parser"]
