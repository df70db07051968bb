from .common import (
    build_day_prefix_re,
    clean_text_ws,
    match_day_prefix,
    normalize_item_text,
    strip_calories,
    strip_day_prefix,
)

__all__ = [
    "build_day_prefix_re",
    "clean_text_ws",
    "match_day_prefix",
    "normalize_item_text",
    "strip_calories",
    "strip_day_prefix",
]
