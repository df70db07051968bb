"""Core configuration, constants and error types.

Import what you need from `lunch_menu_digest.core.config` and
`lunch_menu_digest.core.constants` to avoid heavy side effects at import time.
"""

__all__ = ["config", "constants", "errors"]
