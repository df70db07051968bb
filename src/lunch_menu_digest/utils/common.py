from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence

from lunch_menu_digest.core.constants import DAYS

_WS_RE = re.compile(r"\s+")  # collapse whitespace runs (newlines included) to one space
_KCAL_NUMBER = r"~?\s*\d[\d,]*(?:\.\d+)?\s*kcal\b"
_DASH_KCAL_RE = re.compile(rf"\s*[-—–]\s*{_KCAL_NUMBER}", re.IGNORECASE)  # "Soup — ~120kcal"
_PAREN_KCAL_RE = re.compile(rf"\s*\(\s*{_KCAL_NUMBER}\s*\)", re.IGNORECASE)  # "Soup (~1,200 kcal)"


def clean_text_ws(text: str) -> str:
    return _WS_RE.sub(" ", (text or "").strip())


def strip_calories(text: str) -> str:
    """Remove dash- or paren-wrapped calorie annotations and trim what is left."""
    if not text:
        return ""
    out = _PAREN_KCAL_RE.sub("", text)
    out = _DASH_KCAL_RE.sub("", out)
    return clean_text_ws(out)


def normalize_item_text(text: str) -> str:
    return strip_calories(clean_text_ws(text))


@lru_cache(maxsize=16)
def build_day_prefix_re(weekdays: Sequence[str] = DAYS) -> re.Pattern[str]:
    """`^(Monday|...)\\s*[–—-]\\s*`; weekday names match case-sensitively."""
    names = "|".join(re.escape(day) for day in weekdays)
    return re.compile(rf"^({names})\s*[–—-]\s*")


def match_day_prefix(text: str, weekdays: Sequence[str] = DAYS) -> tuple[str | None, str]:
    """Split a leading weekday token off `text`.

    Returns `(day, remainder)` when the prefix is present, else `(None, text)`.
    """
    m = build_day_prefix_re(tuple(weekdays)).match(text or "")
    if not m:
        return None, text
    return m.group(1), text[m.end():]


def strip_day_prefix(text: str, weekdays: Sequence[str] = DAYS) -> str:
    _, remainder = match_day_prefix(text, weekdays)
    return remainder
