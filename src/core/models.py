"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class InboundEvent:
    """A text message delivered to the bot by the webhook."""

    chat_id: int
    text: str


class LinkKind(Enum):
    """What kind of content a message links to."""

    TRACK = "track"
    PLAYLIST = "playlist"
    INVALID = "invalid"


@dataclass(frozen=True)
class TrackMetadata:
    """Track details returned by the resolution service."""

    id: Optional[str]
    gid: Optional[str]
    name: str
    artists: str
    duration_ms: int
    source_url: Optional[str] = None

    @property
    def duration_formatted(self) -> str:
        """Return duration in M:SS format."""
        total_seconds = self.duration_ms // 1000
        minutes, seconds = divmod(total_seconds, 60)
        return f"{minutes}:{seconds:02d}"


@dataclass(frozen=True)
class DownloadResult:
    """Outcome of a conversion request; no URL means the conversion failed."""

    download_url: Optional[str]

    @property
    def ok(self) -> bool:
        return bool(self.download_url)
