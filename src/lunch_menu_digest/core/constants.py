from __future__ import annotations

# ==========================================
# Calendar
# ==========================================

# Python weekday() order (Monday=0)
DAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Days a weekly menu image covers
MENU_WEEKDAYS: tuple[str, ...] = DAYS[:5]

# en-GB short month names, January first; locale-independent
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# ==========================================
# Section parsing
# ==========================================

SECTION_HEADING_KIND = "h2"  # top-level section boundary on the Exeter page
SUBHEADING_KINDS = ("h3", "h4")  # always treated as headings inside a section
LIST_KINDS = ("ul", "ol")
PARAGRAPH_KIND = "p"
BULLET_CHAR = "•"
HEADING_LENGTH_THRESHOLD = 60  # paragraphs at or above this are prose, not pseudo-headings

SKIP_SECTION_PATTERN = r"panini"  # full-heading match, case-insensitive
SKIP_LINE_PATTERN = r"subject to change"  # substring match, case-insensitive

# ==========================================
# Sources
# ==========================================

COHEN_QUAD_NAME = "Dakota Café (Cohen Quad)"
COHEN_QUAD_INFO = "🕐 12:00–13:30 · 💷 £3.80"

SCHWARZMAN_NAME = "Schwarzman Centre"
SCHWARZMAN_INFO = "🕐 TBC · 💷 TBC"
SCHWARZMAN_HEADER = "*1 Base + 1 Protein + 2 Sides*"
SCHWARZMAN_SKIP_CATEGORIES = frozenset({"toppings", "sauces & pickles"})  # minor items, keeps the message short

BLAVATNIK_NAME = "Blavatnik Café"
BLAVATNIK_INFO = "🕐 TBC · 💷 TBC"
BLAVATNIK_FIELDS = ("meat", "veg", "side")  # numbered in this order

# ==========================================
# Digest text
# ==========================================

DIGEST_TITLE = "🍽 *Lunch Menu*"
NO_ITEMS_NOTICE = "No menu items found for today."
FALLBACK_LABEL = "_Next available: {day}_"

IMAGE_CONTENT_TYPES = ("image/png", "image/jpeg")
