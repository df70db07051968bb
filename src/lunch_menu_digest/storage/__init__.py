"""Week-scoped JSON caches for the image-derived menus."""

from .fallback import ResolvedDay, resolve_day
from .weekly_cache import WeeklyCache, current_week_start, is_fresh

__all__ = ["ResolvedDay", "WeeklyCache", "current_week_start", "is_fresh", "resolve_day"]
