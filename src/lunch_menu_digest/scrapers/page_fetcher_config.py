from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from lunch_menu_digest.core.config import PAGE_FETCH_TIMEOUT_SEC

DEFAULT_USER_AGENTS: Tuple[str, ...] = (
    # Chrome 121 (macOS)
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36",
    # Chrome 121 (Windows)
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36",
    # Safari 17 (macOS)
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_6_4) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
)


@dataclass(frozen=True)
class PageFetcherConfig:
    timeout_sec: int = PAGE_FETCH_TIMEOUT_SEC
    accept_language: str = "en-GB,en;q=0.9"
    user_agents: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_USER_AGENTS)
