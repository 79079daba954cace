"""User-facing chat texts and audio captions.

Captions are sent with parse_mode=HTML, so every value coming from the
resolution service is escaped before interpolation.
"""

from __future__ import annotations

import html

from core.models import TrackMetadata

LIVENESS = "Spotify Telegram bot is live 🎵"

INVALID_LINK = "❌ Please send a valid Spotify link (track or playlist)."
UNSUPPORTED_LINK = "⚠️ Only Spotify track or playlist links are supported for now."
FETCHING = "🎧 Getting your Spotify info..."

TRACK_NOT_FOUND = "❌ Couldn't fetch track info."
TRACK_DOWNLOAD_FAILED = "❌ Failed to download this song."
TRACK_ERROR = "⚠️ Error processing track."

PLAYLIST_NOT_FOUND = "❌ Couldn't fetch playlist or it's empty."
PLAYLIST_COMPLETED = "✅ Playlist completed!"
PLAYLIST_ERROR = "⚠️ Error processing playlist."


def downloading(track: TrackMetadata) -> str:
    return f"🎶 Downloading: {track.name}"


def playlist_detected(total: int) -> str:
    return f"📀 Playlist detected!\nTotal Tracks: {total}\nDownloading..."


def playlist_progress(position: int, total: int, track: TrackMetadata) -> str:
    return f"({position}/{total}) 🎶 {track.name}"


def skipped(track: TrackMetadata) -> str:
    return f"❌ Skipped: {track.name}"


def track_caption(track: TrackMetadata, link: str) -> str:
    """Caption for a single requested track."""

    lines = [
        "<b>🎵 Song Downloaded Successfully!</b>",
        f"🎧 <b>Title:</b> <code>{html.escape(track.name)}</code>",
        f"👤 <b>Artist:</b> <code>{html.escape(track.artists)}</code>",
        f"⏱️ <b>Duration:</b> <code>{track.duration_formatted}</code>",
        f"🔗 <a href=\"{html.escape(link)}\">Open in Spotify</a>",
    ]
    return "\n".join(lines)


def playlist_track_caption(track: TrackMetadata, playlist_link: str) -> str:
    """Caption for one playlist entry, linking back to the track when known."""

    link = track.source_url or playlist_link
    lines = [
        f"<b>🎵 {html.escape(track.name)}</b>",
        f"👤 <b>Artist:</b> <code>{html.escape(track.artists)}</code>",
        f"🔗 <a href=\"{html.escape(link)}\">Open in Spotify</a>",
    ]
    return "\n".join(lines)
