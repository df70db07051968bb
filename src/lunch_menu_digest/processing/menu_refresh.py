from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from lunch_menu_digest.processing.llm_client import gemini_extract_json_from_image
from lunch_menu_digest.processing.mailbox import ImageAttachment, fetch_latest_image_attachments

logger = logging.getLogger(__name__)

AttachmentFetchFunc = Callable[[str], list[ImageAttachment]]
ImageExtractFunc = Callable[[bytes, str, str], Optional[dict[str, Any]]]
ValidateFunc = Callable[[dict[str, Any]], bool]


class ImageMenuRefresher:
    """Refresh hook: newest mailed menu image -> structured menu, or None.

    Every image attachment of the newest matching message is tried in order
    until one yields a menu that passes `validate`.
    """

    def __init__(
        self,
        *,
        source_name: str,
        subject: str,
        prompt: str,
        validate: ValidateFunc,
        fetch_attachments: Optional[AttachmentFetchFunc] = None,
        extract: Optional[ImageExtractFunc] = None,
    ) -> None:
        self._source_name = source_name
        self._subject = subject
        self._prompt = prompt
        self._validate = validate
        self._fetch_attachments = fetch_attachments or fetch_latest_image_attachments
        self._extract = extract or gemini_extract_json_from_image

    def __call__(self) -> Optional[dict[str, Any]]:
        attachments = self._fetch_attachments(self._subject)
        if not attachments:
            logger.info("refresh_no_attachments: %s", self._source_name)
            return None
        for attachment in attachments:
            logger.info(
                "refresh_try_attachment: %s %s (%sKB)",
                self._source_name,
                attachment.filename or "<unnamed>",
                round(len(attachment.content) / 1024),
            )
            menu = self._extract(attachment.content, attachment.content_type, self._prompt)
            if menu and self._validate(menu):
                logger.info("refresh_done: %s", self._source_name)
                return menu
        logger.info("refresh_no_menu: %s", self._source_name)
        return None
