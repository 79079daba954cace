"""Application entry point for the spotrelay webhook."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

import httpx
import uvicorn
from art import tprint
from dotenv import load_dotenv
from fastapi import FastAPI

import settings
from adapters.fabdl_client import FabdlClient
from adapters.telegram_bot_notifier import TelegramBotNotifier
from client import build_http_client, read_bot_token
from core.config import RelayConfig
from core.relay import LinkRelay
from webhook import create_app

NAME = "SPOTRELAY"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    """Mask the bot token, which is part of every Bot API URL."""

    def __init__(self, secret: Optional[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secret = secret

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if self._secret:
            message = message.replace(self._secret, "***")
        return message


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", True):
        return

    load_dotenv()
    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    secret = os.getenv("BOT_TOKEN") if config.get("redact_token", True) else None
    handler = logging.StreamHandler()
    handler.setFormatter(
        _RedactingFormatter(secret, fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )

    logging.basicConfig(level=level, handlers=[handler])
    # httpx logs every request URL at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_app() -> FastAPI:
    """Wire adapters into the relay and wrap it in the webhook app."""

    bot_token = read_bot_token()
    http = build_http_client(settings.HTTP_TIMEOUT_SECONDS)

    notifier = TelegramBotNotifier(http, bot_token, api_base=settings.TELEGRAM_API_BASE)
    resolver = FabdlClient(http, base_url=settings.RESOLVER_BASE_URL)
    relay = LinkRelay(
        resolver=resolver,
        notifier=notifier,
        config=RelayConfig(pacing_seconds=settings.PLAYLIST_PACING_SECONDS),
    )
    return create_app(relay, path=settings.WEBHOOK_PATH, http=http)


def _run(host: Optional[str], port: Optional[int]) -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting spotrelay")
    app = build_app()
    logger.info("Listening for webhook updates on %s", settings.WEBHOOK_PATH)

    uvicorn.run(
        app,
        host=host or settings.WEBHOOK_HOST,
        port=port or settings.WEBHOOK_PORT,
        log_config=None,
    )


def _set_webhook(public_url: str, apply: bool) -> None:
    webhook_url = public_url.rstrip("/") + settings.WEBHOOK_PATH
    if not apply:
        print(f"Webhook URL: {webhook_url}")
        print("Re-run with --apply to register it with the Bot API.")
        return

    _configure_logging()
    token = read_bot_token()
    if not token:
        raise RuntimeError("BOT_TOKEN is required to register the webhook")

    endpoint = f"{settings.TELEGRAM_API_BASE.rstrip('/')}/bot{token}/setWebhook"
    response = httpx.post(endpoint, json={"url": webhook_url}, timeout=settings.HTTP_TIMEOUT_SECONDS)
    body = response.json()
    if not body.get("ok"):
        raise RuntimeError(f"setWebhook failed: {body.get('description', response.status_code)}")
    print(f"Webhook registered: {webhook_url}")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="spotrelay")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Serve the Telegram webhook")
    run_parser.add_argument("--host", help="Bind address (default from config.json)")
    run_parser.add_argument("--port", type=int, help="Bind port (default from config.json)")

    hook_parser = subparsers.add_parser(
        "webhook-url",
        help="Show or register the webhook URL for a public base URL.",
    )
    hook_parser.add_argument("public_url", help="Public base URL, e.g. https://bot.example.com")
    hook_parser.add_argument("--apply", action="store_true", help="Call setWebhook")

    args = parser.parse_args(argv)
    if args.command == "webhook-url":
        _set_webhook(args.public_url, args.apply)
        return
    _run(getattr(args, "host", None), getattr(args, "port", None))


if __name__ == "__main__":
    main()
