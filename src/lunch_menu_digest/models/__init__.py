"""Typed models for cached menu payloads."""

from .menu import BlavatnikDay, BlavatnikMenu, SchwarzmanMenu, WeeklyPayload

__all__ = ["BlavatnikDay", "BlavatnikMenu", "SchwarzmanMenu", "WeeklyPayload"]
