# ui/workers/catalog_workers.py
from __future__ import annotations

import logging

from PySide6.QtCore import QThread, Signal

from lrcplayer.core.catalog_client import CatalogClient, CatalogError

logger = logging.getLogger(__name__)


def _artist_name(info: dict) -> str | None:
    artist = info.get("artist")
    if isinstance(artist, dict):
        return artist.get("name")
    return str(artist) if artist else None


class TrackInfoWorker(QThread):
    """Loads title/artist for a track; playback does not wait for it."""
    finished_fetch = Signal(bool, str, object, str)  # ok, track_id, {"title", "artist"} | None, error msg

    def __init__(self, client: CatalogClient, track_id: str, parent=None):
        super().__init__(parent)
        self.client = client
        self.track_id = track_id

    def run(self):
        try:
            info = self.client.get_track(self.track_id)
        except CatalogError as e:
            logger.warning("Track metadata unavailable for %s: %s", self.track_id, e)
            self.finished_fetch.emit(False, self.track_id, None, str(e))
            return

        meta = {"title": info.get("title") or self.track_id, "artist": _artist_name(info)}
        self.finished_fetch.emit(True, self.track_id, meta, "")


class SearchWorker(QThread):
    finished_search = Signal(bool, str, object, str)  # ok, query, [track_id, ...], error msg

    def __init__(self, client: CatalogClient, query: str, parent=None):
        super().__init__(parent)
        self.client = client
        self.query = query

    def run(self):
        try:
            results = self.client.search(self.query)
        except CatalogError as e:
            logger.warning("Search for %r failed: %s", self.query, e)
            self.finished_search.emit(False, self.query, [], str(e))
            return

        # the catalog answers with a list of track ids
        self.finished_search.emit(True, self.query, [str(r) for r in results], "")
