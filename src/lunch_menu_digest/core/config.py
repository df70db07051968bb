from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=REPO_ROOT / ".env")


def _env_str(name: str, default: str) -> str:
    """Read a string env var, falling back when unset or blank."""
    raw = os.getenv(name, "").strip()
    return raw or default


def _env_int(name: str, default: int) -> int:
    """Parse an integer env var, ignoring values that are not integers."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return raw in {"1", "true", "True", "yes", "YES"}


# ==========================================
# Storage
# ==========================================

DATA_DIR = Path(_env_str("DATA_DIR", str(REPO_ROOT / "data")))
BLAVATNIK_MENU_PATH = _env_str("BLAVATNIK_MENU_PATH", str(DATA_DIR / "blavatnik-menu.json"))
SCHWARZMAN_MENU_PATH = _env_str("SCHWARZMAN_MENU_PATH", str(DATA_DIR / "schwarzman-menu.json"))

# ==========================================
# Exeter College page (Cohen Quad)
# ==========================================

EXETER_MENU_URL = _env_str(
    "EXETER_MENU_URL",
    "https://www.exeter.ox.ac.uk/students/catering/todays-menus/",
)
EXETER_SECTION_NAME = _env_str("EXETER_SECTION_NAME", "Dakota Café (Cohen Quad)")
PAGE_FETCH_TIMEOUT_SEC = _env_int("PAGE_FETCH_TIMEOUT_SEC", 10)

# ==========================================
# Mailbox (menu images arrive as attachments)
# ==========================================

GMAIL_USER = os.getenv("GMAIL_USER", "").strip()
GMAIL_APP_PASSWORD = os.getenv("GMAIL_APP_PASSWORD", "").strip()
IMAP_HOST = _env_str("IMAP_HOST", "imap.gmail.com")
IMAP_PORT = _env_int("IMAP_PORT", 993)
IMAP_MAILBOX = _env_str("IMAP_MAILBOX", "INBOX")
BLAVATNIK_EMAIL_SUBJECT = _env_str("BLAVATNIK_EMAIL_SUBJECT", "Weekly Menu Update")
SCHWARZMAN_EMAIL_SUBJECT = _env_str("SCHWARZMAN_EMAIL_SUBJECT", "Schwarzman Menu")

# ==========================================
# Gemini vision extraction
# ==========================================

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "").strip()
GEMINI_API_BASE = _env_str("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = _env_str("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TIMEOUT_SEC = _env_int("GEMINI_TIMEOUT_SEC", 60)
GEMINI_MAX_RETRIES = _env_int("GEMINI_MAX_RETRIES", 2)
GEMINI_RETRY_BACKOFF_SEC = _env_float("GEMINI_RETRY_BACKOFF_SEC", 1.5)
GEMINI_MAX_OUTPUT_TOKENS = _env_int("GEMINI_MAX_OUTPUT_TOKENS", 2048)

# ==========================================
# Source toggles
# ==========================================

SCHWARZMAN_ENABLED = _env_bool("SCHWARZMAN_ENABLED", True)
BLAVATNIK_ENABLED = _env_bool("BLAVATNIK_ENABLED", True)
