"""Menu sources; each turns a weekday name into formatted digest lines."""

from .base import FetchFunc, MenuSource

__all__ = ["FetchFunc", "MenuSource"]
