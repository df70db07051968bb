"""Digest composition across all registered menu sources."""

from .aggregator import SourceAggregator, format_date_label, get_todays_digest

__all__ = ["SourceAggregator", "format_date_label", "get_todays_digest"]
