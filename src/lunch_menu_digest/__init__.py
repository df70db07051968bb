"""Daily lunch menu digest built from scraped pages and mailed menu images."""

__all__ = ["core", "digest", "models", "processing", "scrapers", "sources", "storage", "utils"]
