from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

FetchFunc = Callable[[str], list[str]]


@dataclass(frozen=True)
class MenuSource:
    name: str
    info: str
    fetch: FetchFunc
