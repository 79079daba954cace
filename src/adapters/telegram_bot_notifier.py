"""Telegram Bot API notification adapter.

Delivers chat texts and audio messages back to the chat that sent the link.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

LOGGER = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.telegram.org"


class TelegramBotNotifier:
    """Notifier adapter that sends messages via the Telegram Bot API."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        bot_token: str,
        api_base: str = DEFAULT_API_BASE,
    ) -> None:
        self._http = http
        self._bot_token = bot_token
        self._api_base = api_base.rstrip("/")

    def _endpoint(self, method: str) -> str:
        # The Bot API endpoint is deterministic and derived from the token.
        return f"{self._api_base}/bot{self._bot_token}/{method}"

    async def send_text(self, chat_id: int, text: str, **extra: Any) -> bool:
        """Send a plain text message; extra fields are passed through as-is."""

        payload = {"chat_id": chat_id, "text": text, **extra}
        return await self._call("sendMessage", payload)

    async def send_audio(self, chat_id: int, audio_url: str, caption: str) -> bool:
        """Send an audio file by URL with an HTML caption."""

        payload = {
            "chat_id": chat_id,
            "audio": audio_url,
            "caption": caption,
            "parse_mode": "HTML",
        }
        return await self._call("sendAudio", payload)

    async def _call(self, method: str, payload: dict[str, Any]) -> bool:
        # Delivery failures are reported in the log only; callers treat sends
        # as fire-and-forget and must keep going.
        try:
            response = await self._http.post(self._endpoint(method), json=payload)
        except httpx.HTTPError as e:
            LOGGER.warning("Bot API %s to chat %s failed: %s", method, payload["chat_id"], type(e).__name__)
            return False

        if response.is_success:
            return True

        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            description = body.get("description", "")
        else:
            description = response.text
        LOGGER.warning(
            "Bot API %s to chat %s returned %s: %s",
            method,
            payload["chat_id"],
            response.status_code,
            description,
        )
        return False
