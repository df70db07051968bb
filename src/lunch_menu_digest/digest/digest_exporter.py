from __future__ import annotations

import argparse
import datetime
import logging
import sys

from lunch_menu_digest.digest.aggregator import get_todays_digest
from lunch_menu_digest.digest.registry import build_default_caches, build_default_sources


def _log(message: str) -> None:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}", file=sys.stderr)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print today's lunch menu digest.")
    parser.add_argument("--date", help="compose the digest for YYYY-MM-DD instead of today")
    parser.add_argument("--refresh", action="store_true", help="re-extract the image menus before composing")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at INFO level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        now = datetime.datetime.fromisoformat(args.date) if args.date else datetime.datetime.now()
    except ValueError:
        _log(f"invalid --date: {args.date}")
        return 2

    _log("digest start")
    caches = build_default_caches(now_provider=lambda: now)
    if args.refresh:
        for name, cache in caches.items():
            refreshed = cache.refresh()
            _log(f"refresh {name}: {'saved' if refreshed else 'nothing new'}")

    digest = get_todays_digest(now=now, sources=build_default_sources(caches))
    print(digest)
    _log("digest done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
