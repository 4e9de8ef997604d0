# core/catalog_client.py
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import requests


class CatalogError(Exception):
    """Transport or HTTP failure talking to the catalog API."""


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3001", timeout: float = 15.0, user_agent: str = "lrcplayer/0.1"):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def _track_url(self, track_id: str, *parts: str) -> str:
        path = "/".join((quote(str(track_id), safe=""),) + parts)
        return f"{self.base_url}/track/{path}"

    # --- URLs handed to the player / UI ---
    def stream_url(self, track_id: str) -> str:
        return self._track_url(track_id, "stream")

    def cover_url(self, track_id: str, size: int = 500) -> str:
        return self._track_url(track_id, "cover", str(int(size)))

    def download_url(self, track_id: str) -> str:
        return self._track_url(track_id, "download")

    # --- requests ---
    def get_track(self, track_id: str) -> dict:
        # GET /track/{id}
        try:
            r = self.session.get(self._track_url(track_id), timeout=self.timeout)
            if r.status_code == 404:
                raise CatalogError(f"Track not found: {track_id}")
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            raise CatalogError(f"Failed to fetch track {track_id}: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Invalid track payload for {track_id}: {e}") from e
        return data if isinstance(data, dict) else {}

    def get_lyrics(self, track_id: str) -> Optional[str]:
        """Raw LRC or plain text for a track, or None when the catalog has none."""
        # GET /track/{id}/lyrics -> text/plain, 404 when missing
        try:
            r = self.session.get(self._track_url(track_id, "lyrics"), timeout=self.timeout)
            if r.status_code == 404:
                return None
            r.raise_for_status()
        except requests.RequestException as e:
            raise CatalogError(f"Failed to fetch lyrics for {track_id}: {e}") from e

        # lyrics are always UTF-8; requests would guess latin-1 for bare text/plain
        text = r.content.decode("utf-8", errors="replace")
        return text if text.strip() else None

    def search(self, query: str) -> list:
        # GET /search?q=...
        try:
            r = self.session.get(f"{self.base_url}/search", params={"q": query}, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            raise CatalogError(f"Search failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Invalid search payload: {e}") from e
        return data if isinstance(data, list) else []
