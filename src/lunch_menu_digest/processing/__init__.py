"""Refresh pipeline for image menus: mailbox attachments to structured JSON."""

__all__ = ["llm_client", "mailbox", "menu_refresh", "prompts"]
