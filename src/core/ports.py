"""Ports (interfaces) used by the core relay.

Ports define the minimal contracts for the resolution and notification
adapters so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from core.models import DownloadResult, TrackMetadata


class ResolverPort(Protocol):
    """Link resolution and audio conversion required by the relay."""

    async def resolve_track(self, url: str) -> Optional[TrackMetadata]:
        ...

    async def resolve_playlist(self, url: str) -> list[TrackMetadata]:
        ...

    async def convert(self, gid: Optional[str], track_id: Optional[str]) -> DownloadResult:
        ...


class NotifierPort(Protocol):
    """Chat delivery operations required by the relay.

    Both calls report delivery as a bool and must not raise.
    """

    async def send_text(self, chat_id: int, text: str, **extra: Any) -> bool:
        ...

    async def send_audio(self, chat_id: int, audio_url: str, caption: str) -> bool:
        ...
