"""Week-scoped read-through cache for image-derived menus.

Each source owns one JSON file shaped as `WeeklyPayload`. A payload is fresh
only while its `weekCommencing` Monday is the Monday of the current week, so
crossing into a new week invalidates it regardless of time of day.

Reads are not serialized: two digest requests arriving together may both see
a stale payload and both call the refresh hook. That costs a duplicate
upstream call but is otherwise harmless, since a refresh always rewrites the
whole file (atomically) with freshly extracted data.
"""

from __future__ import annotations

import datetime
import json
import logging
import os
from typing import Any, Callable, Optional

from lunch_menu_digest.core.errors import MalformedCache
from lunch_menu_digest.models import WeeklyPayload

logger = logging.getLogger(__name__)

RefreshFunc = Callable[[], Optional[dict[str, Any]]]
ValidateFunc = Callable[[dict[str, Any]], bool]
NowFunc = Callable[[], datetime.datetime]

DateLike = datetime.date | datetime.datetime


def _local_date(reference: DateLike) -> datetime.date:
    if isinstance(reference, datetime.datetime):
        if reference.tzinfo is not None:
            reference = reference.astimezone()
        return reference.date()
    return reference


def current_week_start(reference: Optional[DateLike] = None) -> datetime.date:
    """Monday of the week containing `reference`; a Sunday belongs to the Monday before it."""
    day = _local_date(reference if reference is not None else datetime.datetime.now())
    return day - datetime.timedelta(days=day.weekday())


def week_commencing_stamp(week_start: datetime.date) -> str:
    # local midnight, with offset, so the calendar date survives a round trip
    return datetime.datetime.combine(week_start, datetime.time.min).astimezone().isoformat()


def parse_week_commencing(value: Any) -> datetime.date:
    if not isinstance(value, str) or not value.strip():
        raise MalformedCache(f"weekCommencing missing or not a string: {value!r}")
    raw = value.strip()
    try:
        if len(raw) == 10:
            return datetime.date.fromisoformat(raw)
        return _local_date(datetime.datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError as e:
        raise MalformedCache(f"weekCommencing not ISO-8601: {raw!r}") from e


def parse_payload(raw: Any) -> WeeklyPayload:
    if not isinstance(raw, dict):
        raise MalformedCache("payload is not an object")
    menu = raw.get("menu")
    if not isinstance(menu, dict):
        raise MalformedCache("payload.menu is not an object")
    week = raw.get("weekCommencing")
    parse_week_commencing(week)
    return {"weekCommencing": week, "menu": menu}


def is_fresh(payload: Optional[WeeklyPayload], reference: Optional[DateLike] = None) -> bool:
    if not payload:
        return False
    try:
        stored = parse_week_commencing(payload.get("weekCommencing"))
    except MalformedCache:
        return False
    return stored == current_week_start(reference)


def _atomic_write_json(path: str, payload: dict) -> None:
    """Write to a temp file and swap it in."""
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    os.replace(tmp_path, path)


class WeeklyCache:
    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        refresh: Optional[RefreshFunc] = None,
        validate: Optional[ValidateFunc] = None,
        now_provider: NowFunc = datetime.datetime.now,
    ) -> None:
        self._path = os.fspath(path)
        self._refresh = refresh
        self._validate = validate
        self._now = now_provider

    @property
    def path(self) -> str:
        return self._path

    def current_week_start(self) -> datetime.date:
        return current_week_start(self._now())

    def is_fresh(self, payload: Optional[WeeklyPayload]) -> bool:
        return is_fresh(payload, self._now())

    def load(self) -> Optional[WeeklyPayload]:
        """Return the stored payload, or None when it is absent or malformed."""
        if not os.path.exists(self._path):
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return parse_payload(json.load(f))
        except (OSError, ValueError, MalformedCache) as e:
            logger.warning("cache_malformed: %s (%s)", self._path, e)
            return None

    def save(self, menu: dict[str, Any]) -> WeeklyPayload:
        payload: WeeklyPayload = {
            "weekCommencing": week_commencing_stamp(self.current_week_start()),
            "menu": menu,
        }
        parent = os.path.dirname(self._path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        _atomic_write_json(self._path, dict(payload))
        logger.info("cache_saved: %s week=%s", self._path, payload["weekCommencing"])
        return payload

    def refresh(self) -> bool:
        """Run the refresh hook; replace the payload wholesale if it produced a usable menu."""
        if self._refresh is None:
            return False
        menu = self._refresh()
        if not menu:
            logger.info("refresh_empty: %s", self._path)
            return False
        if self._validate is not None and not self._validate(menu):
            logger.info("refresh_rejected: %s", self._path)
            return False
        self.save(menu)
        return True

    def read(self, *, force_refresh: bool = False) -> Optional[dict[str, Any]]:
        """Menu for the current week, refreshing first when the payload is stale.

        A refresh that yields nothing leaves the file untouched, so a stale
        menu is still served; with no file at all the result is None.
        """
        payload = self.load()
        if force_refresh or not self.is_fresh(payload):
            logger.info("cache_stale: %s", self._path)
            if self.refresh():
                payload = self.load()
        if payload is None:
            return None
        return payload["menu"]
