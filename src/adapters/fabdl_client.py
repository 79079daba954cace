"""fabdl resolution and conversion adapter.

Implements the core ResolverPort on top of the public fabdl API, which maps
Spotify links to track metadata and mp3 download links.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.models import DownloadResult, TrackMetadata

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.fabdl.com"


def _artists_label(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    names = []
    for artist in raw:
        if isinstance(artist, dict):
            name = artist.get("name")
        else:
            name = artist
        if name:
            names.append(str(name))
    return ", ".join(names)


def _duration_ms(raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


def _optional_str(raw: Any) -> Optional[str]:
    if raw is None or raw == "":
        return None
    return str(raw)


def _url_or_none(raw: Any) -> Optional[str]:
    return raw if isinstance(raw, str) and raw else None


def parse_track(data: dict[str, Any], source_url: Optional[str] = None) -> TrackMetadata:
    """Build TrackMetadata from one fabdl track object."""

    external_urls = data.get("external_urls")
    if not isinstance(external_urls, dict):
        external_urls = {}
    return TrackMetadata(
        id=_optional_str(data.get("id")),
        gid=_optional_str(data.get("gid")),
        name=str(data.get("name") or "Unknown track"),
        artists=_artists_label(data.get("artists")),
        duration_ms=_duration_ms(data.get("duration_ms")),
        source_url=_url_or_none(external_urls.get("spotify")) or source_url,
    )


class FabdlClient:
    """Thin async wrapper that satisfies the ResolverPort contract."""

    def __init__(self, http: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def _get_result(self, path: str, params: Optional[dict[str, str]] = None) -> dict[str, Any]:
        response = await self._http.get(f"{self._base_url}{path}", params=params)
        if not response.is_success:
            # Upstream refusals count as "nothing resolved", not as a crash.
            LOGGER.warning("fabdl %s returned %s", path, response.status_code)
            return {}
        body = response.json()
        if not isinstance(body, dict):
            return {}
        result = body.get("result")
        return result if isinstance(result, dict) else {}

    async def resolve_track(self, url: str) -> Optional[TrackMetadata]:
        """Return metadata for a track link, or None when it cannot be resolved."""

        result = await self._get_result("/spotify/get", {"url": url})
        if not result.get("id"):
            return None
        return parse_track(result, source_url=url)

    async def resolve_playlist(self, url: str) -> list[TrackMetadata]:
        """Return the playlist tracks in listing order (empty when unavailable)."""

        result = await self._get_result("/spotify/get", {"url": url})
        tracks = result.get("tracks")
        if not isinstance(tracks, list):
            tracks = []
        LOGGER.debug("Playlist %s resolved to %s tracks", url, len(tracks))
        return [parse_track(track) for track in tracks if isinstance(track, dict)]

    async def convert(self, gid: Optional[str], track_id: Optional[str]) -> DownloadResult:
        """Ask fabdl to convert a track and return the absolute download URL."""

        if not gid or not track_id:
            return DownloadResult(download_url=None)

        path = f"/spotify/mp3-convert-task/{quote(gid, safe='')}/{quote(track_id, safe='')}"
        result = await self._get_result(path)
        download_path = _url_or_none(result.get("download_url"))
        if not download_path:
            return DownloadResult(download_url=None)
        if download_path.startswith(("http://", "https://")):
            return DownloadResult(download_url=download_path)
        return DownloadResult(download_url=f"{self._base_url}{download_path}")
