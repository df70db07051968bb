from __future__ import annotations

import base64
import json
import logging
import re
import time
from typing import Any

import requests

from lunch_menu_digest.core.config import (
    GEMINI_API_BASE,
    GEMINI_API_KEY,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_MAX_RETRIES,
    GEMINI_MODEL,
    GEMINI_RETRY_BACKOFF_SEC,
    GEMINI_TIMEOUT_SEC,
)

logger = logging.getLogger(__name__)

_RETRY_STATUS = {429, 500, 502, 503, 504}
_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)  # markdown code fences
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")  # "[1, 2,]" -> "[1, 2]"


def _extract_gemini_text(payload: dict[str, Any]) -> str:
    # text of the first candidate part
    try:
        return payload["candidates"][0]["content"]["parts"][0]["text"].strip()
    except Exception:
        return ""


def parse_json(text: str) -> dict[str, Any] | None:
    """Read the JSON object out of a vision reply.

    JSON response mode usually returns a bare object; older models still
    wrap it in a code fence, add a sentence around it, or leave a trailing
    comma, so each of those is peeled off in turn.
    """
    raw = _FENCE_RE.sub("", text or "").strip()
    if not raw:
        return None
    start, end = raw.find("{"), raw.rfind("}")
    candidates = [raw]
    if start != -1 and end > start:
        block = raw[start : end + 1]
        candidates += [block, _TRAILING_COMMA_RE.sub(r"\1", block)]
    for candidate in candidates:
        try:
            obj = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(obj, dict):
            return obj
    return None


def gemini_extract_json_from_image(
    image: bytes,
    media_type: str,
    prompt: str,
    *,
    api_key: str | None = None,
    session: requests.Session | None = None,
) -> dict[str, Any] | None:
    """Send one image plus an extraction prompt to Gemini and return the parsed JSON object."""
    key = (api_key if api_key is not None else GEMINI_API_KEY).strip()
    if not key:
        logger.warning("vision_unavailable: GEMINI_API_KEY not set")
        return None
    client = session or requests
    url = f"{GEMINI_API_BASE}/models/{GEMINI_MODEL}:generateContent"
    request_payload = {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {
                        "inline_data": {
                            "mime_type": media_type,
                            "data": base64.b64encode(image).decode("ascii"),
                        }
                    },
                    {"text": prompt},
                ],
            }
        ],
        "generationConfig": {
            "temperature": 0.0,
            "maxOutputTokens": GEMINI_MAX_OUTPUT_TOKENS,
            "responseMimeType": "application/json",
        },
    }
    max_attempts = max(1, GEMINI_MAX_RETRIES + 1)
    last_err = ""
    for attempt in range(1, max_attempts + 1):
        try:
            resp = client.post(
                url,
                headers={"x-goog-api-key": key, "Content-Type": "application/json"},
                json=request_payload,
                timeout=GEMINI_TIMEOUT_SEC,
            )
        except requests.RequestException as e:
            last_err = f"{type(e).__name__}: {e}"
            if attempt < max_attempts:
                time.sleep(GEMINI_RETRY_BACKOFF_SEC * (2 ** (attempt - 1)))
                continue
            break

        if not resp.ok:
            last_err = f"{resp.status_code} {resp.text[:200]}"
            if resp.status_code in _RETRY_STATUS and attempt < max_attempts:
                time.sleep(GEMINI_RETRY_BACKOFF_SEC * (2 ** (attempt - 1)))
                continue
            break

        try:
            data = resp.json()
        except ValueError:
            last_err = "response body is not JSON"
            break

        text = _extract_gemini_text(data)
        parsed = parse_json(text)
        if parsed is None:
            snippet = re.sub(r"\s+", " ", text)[:160]
            logger.warning("vision_unparseable: %s", snippet)
        return parsed

    logger.warning("vision_failed: %s", last_err)
    return None
