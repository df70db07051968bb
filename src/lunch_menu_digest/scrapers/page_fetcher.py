from __future__ import annotations

import logging
import random
from typing import Optional

import requests

from lunch_menu_digest.core.errors import SourceUnavailable
from lunch_menu_digest.scrapers.page_fetcher_config import PageFetcherConfig

logger = logging.getLogger(__name__)


def _make_headers(config: PageFetcherConfig) -> dict[str, str]:
    headers = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": config.accept_language,
    }
    if config.user_agents:
        headers["User-Agent"] = random.choice(config.user_agents)
    return headers


def fetch_page_html(
    url: str,
    config: Optional[PageFetcherConfig] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """GET `url` and return its body; transport and HTTP errors raise `SourceUnavailable`."""
    cfg = config or PageFetcherConfig()
    client = session or requests
    logger.info("fetch_start: %s", url)
    try:
        resp = client.get(url, headers=_make_headers(cfg), timeout=cfg.timeout_sec)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("fetch_failed: %s (%s)", url, type(e).__name__)
        raise SourceUnavailable(url, f"{type(e).__name__}: {e}") from e
    logger.info("fetch_done: %s status=%s len=%s", url, resp.status_code, len(resp.text or ""))
    return resp.text or ""
