"""FastAPI webhook transport.

Every POST is acknowledged with an empty 200, whatever happens inside, so
Telegram never retries or flags a delivery.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from adapters.telegram_mapper import build_event
from core import messages
from core.relay import LinkRelay

LOGGER = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    relay: LinkRelay,
    path: str = "/api/telegram",
    http: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the webhook app around a ready relay.

    When an HTTP client is passed, it is closed on application shutdown.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        if http is not None:
            await http.aclose()

    app = FastAPI(title="spotrelay", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

    async def telegram_webhook(request: Request) -> Response:
        if request.method != "POST":
            return PlainTextResponse(messages.LIVENESS)

        try:
            update = await request.json()
            event = build_event(update)
            if event is None:
                return Response(status_code=200)
            await relay.handle(event)
        except Exception:
            LOGGER.exception("Error while handling webhook update")
        return Response(status_code=200)

    app.add_api_route(path, telegram_webhook, methods=ALL_METHODS)
    if path != "/":
        app.add_api_route("/", telegram_webhook, methods=ALL_METHODS)
    return app
