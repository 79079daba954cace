"""HTTP client factory for spotrelay.

One AsyncClient is shared by the Bot API and fabdl adapters for the life of
the process; the webhook app closes it on shutdown.
"""

from __future__ import annotations

import logging
import os

import httpx
from dotenv import load_dotenv


def read_bot_token() -> str:
    """Read BOT_TOKEN via python-dotenv to keep secrets out of the repo.

    A missing token is not fatal: the Bot API rejects every call, which shows
    up as delivery warnings in the log.
    """

    load_dotenv()
    token = os.getenv("BOT_TOKEN", "")
    if not token:
        logging.getLogger(__name__).warning("BOT_TOKEN is not set; Bot API calls will fail")
    return token


def build_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Create the shared async HTTP client."""

    logging.getLogger(__name__).info("Initializing HTTP client (timeout %ss)", timeout_seconds)
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds), follow_redirects=True)
