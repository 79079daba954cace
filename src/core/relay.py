"""Core link relay.

This module is integration-agnostic. It only relies on ports for resolution
and notifications, so the webhook transport and HTTP clients can change
without touching the flow here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from core import messages
from core.config import RelayConfig
from core.links import classify_link, is_spotify_link
from core.models import InboundEvent, LinkKind
from core.ports import NotifierPort, ResolverPort

LOGGER = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class LinkRelay:
    """Orchestrates classification, resolution, and delivery for one message."""

    def __init__(
        self,
        resolver: ResolverPort,
        notifier: NotifierPort,
        config: Optional[RelayConfig] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._resolver = resolver
        self._notifier = notifier
        self._config = config or RelayConfig()
        self._sleep = sleep

    async def handle(self, event: InboundEvent) -> LinkKind:
        """Classify one inbound message and run the matching resolver."""

        chat_id = event.chat_id
        text = event.text

        if not is_spotify_link(text):
            LOGGER.info("Rejected non-Spotify message from chat %s", chat_id)
            await self._notifier.send_text(chat_id, messages.INVALID_LINK)
            return LinkKind.INVALID

        kind = classify_link(text)
        if kind is LinkKind.INVALID:
            LOGGER.info("Rejected unsupported Spotify link from chat %s", chat_id)
            await self._notifier.send_text(chat_id, messages.UNSUPPORTED_LINK)
            return kind

        # Resolution is slow, so acknowledge before the first upstream call.
        await self._notifier.send_text(chat_id, messages.FETCHING)

        if kind is LinkKind.TRACK:
            await self.process_track(chat_id, text)
        else:
            await self.process_playlist(chat_id, text)
        return kind

    async def process_track(self, chat_id: int, link: str) -> None:
        """Resolve one track and forward its audio to the chat."""

        try:
            track = await self._resolver.resolve_track(link)
            if track is None:
                LOGGER.warning("Track lookup returned nothing for %s", link)
                await self._notifier.send_text(chat_id, messages.TRACK_NOT_FOUND)
                return

            await self._notifier.send_text(chat_id, messages.downloading(track))

            result = await self._resolver.convert(track.gid, track.id)
            if not result.ok:
                LOGGER.warning("No download URL for track %s (%s)", track.id, track.name)
                await self._notifier.send_text(chat_id, messages.TRACK_DOWNLOAD_FAILED)
                return

            caption = messages.track_caption(track, link)
            await self._notifier.send_audio(chat_id, result.download_url, caption)
            LOGGER.info("Track %s sent to chat %s", track.id, chat_id)
        except Exception:
            LOGGER.exception("Track error for chat %s", chat_id)
            await self._notifier.send_text(chat_id, messages.TRACK_ERROR)

    async def process_playlist(self, chat_id: int, link: str) -> None:
        """Resolve a playlist and forward every track in listing order."""

        try:
            tracks = await self._resolver.resolve_playlist(link)
            if not tracks:
                LOGGER.warning("Playlist lookup empty for %s", link)
                await self._notifier.send_text(chat_id, messages.PLAYLIST_NOT_FOUND)
                return

            total = len(tracks)
            await self._notifier.send_text(chat_id, messages.playlist_detected(total))

            sent = 0
            for position, track in enumerate(tracks, start=1):
                await self._notifier.send_text(
                    chat_id, messages.playlist_progress(position, total, track)
                )

                # One track failing must never abort the rest of the playlist.
                try:
                    result = await self._resolver.convert(track.gid, track.id)
                    if result.ok:
                        caption = messages.playlist_track_caption(track, link)
                        await self._notifier.send_audio(chat_id, result.download_url, caption)
                        sent += 1
                    else:
                        LOGGER.warning("No download URL for playlist track %s", track.id)
                        await self._notifier.send_text(chat_id, messages.skipped(track))
                except Exception:
                    LOGGER.exception("Playlist track %s failed", track.id)
                    await self._notifier.send_text(chat_id, messages.skipped(track))

                await self._sleep(self._config.pacing_seconds)

            await self._notifier.send_text(chat_id, messages.PLAYLIST_COMPLETED)
            LOGGER.info("Playlist done for chat %s: %s/%s tracks sent", chat_id, sent, total)
        except Exception:
            LOGGER.exception("Playlist error for chat %s", chat_id)
            await self._notifier.send_text(chat_id, messages.PLAYLIST_ERROR)
