from __future__ import annotations

import email
import imaplib
import logging
from dataclasses import dataclass
from email.message import Message
from typing import Optional

from lunch_menu_digest.core.config import (
    GMAIL_APP_PASSWORD,
    GMAIL_USER,
    IMAP_HOST,
    IMAP_MAILBOX,
    IMAP_PORT,
)
from lunch_menu_digest.core.constants import IMAGE_CONTENT_TYPES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailboxConfig:
    user: str = GMAIL_USER
    password: str = GMAIL_APP_PASSWORD
    host: str = IMAP_HOST
    port: int = IMAP_PORT
    mailbox: str = IMAP_MAILBOX

    @property
    def has_credentials(self) -> bool:
        return bool(self.user and self.password)


@dataclass(frozen=True)
class ImageAttachment:
    filename: str
    content_type: str
    content: bytes


def extract_image_attachments(msg: Message) -> list[ImageAttachment]:
    out: list[ImageAttachment] = []
    for part in msg.walk():
        if part.is_multipart():
            continue
        content_type = part.get_content_type()
        if content_type not in IMAGE_CONTENT_TYPES:
            continue
        payload = part.get_payload(decode=True)
        if not payload:
            continue
        out.append(ImageAttachment(part.get_filename() or "", content_type, payload))
    return out


def fetch_latest_image_attachments(
    subject: str,
    config: Optional[MailboxConfig] = None,
) -> list[ImageAttachment]:
    """Image attachments of the newest message whose subject contains `subject`.

    Missing credentials, an empty search or IMAP errors all yield an empty list.
    """
    cfg = config or MailboxConfig()
    if not cfg.has_credentials:
        logger.warning("mailbox_skipped: GMAIL_USER or GMAIL_APP_PASSWORD not set")
        return []

    try:
        mail = imaplib.IMAP4_SSL(cfg.host, cfg.port)
    except (OSError, imaplib.IMAP4.error) as e:
        logger.warning("mailbox_connect_failed: %s (%s)", cfg.host, e)
        return []

    try:
        mail.login(cfg.user, cfg.password)
        mail.select(cfg.mailbox)
        _, data = mail.search(None, "SUBJECT", f'"{subject}"')
        ids = data[0].split() if data and data[0] else []
        if not ids:
            logger.info("mailbox_no_match: %s", subject)
            return []
        _, msg_data = mail.fetch(ids[-1], "(RFC822)")
        raw = msg_data[0][1] if msg_data and isinstance(msg_data[0], tuple) else b""
        attachments = extract_image_attachments(email.message_from_bytes(raw))
        if not attachments:
            logger.info("mailbox_no_images: %s", subject)
        return attachments
    except (OSError, imaplib.IMAP4.error) as e:
        logger.warning("mailbox_error: %s (%s)", subject, e)
        return []
    finally:
        try:
            mail.logout()
        except (OSError, imaplib.IMAP4.error):
            pass
