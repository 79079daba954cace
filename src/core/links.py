"""Spotify link classification (core domain)."""

from __future__ import annotations

from core.models import LinkKind

SPOTIFY_MARKER = "spotify.com/"
TRACK_MARKER = "spotify.com/track"
PLAYLIST_MARKER = "spotify.com/playlist"


def is_spotify_link(text: str) -> bool:
    """Return True when the text mentions any Spotify URL."""

    return SPOTIFY_MARKER in text


def classify_link(text: str) -> LinkKind:
    """Classify message text by substring inspection.

    Track wins when both markers are present. Anything else, including
    album and artist links, is INVALID.
    """

    if TRACK_MARKER in text:
        return LinkKind.TRACK
    if PLAYLIST_MARKER in text:
        return LinkKind.PLAYLIST
    return LinkKind.INVALID
