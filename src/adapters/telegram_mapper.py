"""Telegram-to-core update mapping adapter.

This keeps Bot API payload details out of the core relay.
"""

from __future__ import annotations

from typing import Any, Optional

from core.models import InboundEvent


def build_event(update: Any) -> Optional[InboundEvent]:
    """Build an InboundEvent from a Bot API update.

    Returns None for updates that carry no text message (edits, stickers,
    callback queries, ...), which the webhook acknowledges without action.
    A text message without a chat id raises ValueError.
    """

    if not isinstance(update, dict):
        return None
    message = update.get("message")
    if not isinstance(message, dict):
        return None
    text = message.get("text")
    if not isinstance(text, str) or not text:
        return None

    chat = message.get("chat") or {}
    chat_id = chat.get("id")
    if chat_id is None:
        raise ValueError("Message has text but no chat id")

    return InboundEvent(chat_id=int(chat_id), text=text.strip())
