from __future__ import annotations

from typing import Any, TypedDict, Union


class BlavatnikDay(TypedDict, total=False):
    meat: str
    veg: str
    side: str


# weekday name -> {meat, veg, side} or a plain list of dishes
BlavatnikMenu = dict[str, Union[BlavatnikDay, list[str]]]

# category -> items, in board order
SchwarzmanMenu = dict[str, list[str]]


class WeeklyPayload(TypedDict):
    weekCommencing: str
    menu: dict[str, Any]
