# ui/workers/lyrics_fetch_worker.py
from __future__ import annotations

import logging

from PySide6.QtCore import QThread, Signal

from lrcplayer.core.catalog_client import CatalogClient, CatalogError

logger = logging.getLogger(__name__)


class LyricsFetchWorker(QThread):
    """Fetches raw lyrics text for one track off the GUI thread."""
    progress = Signal(str)
    finished_fetch = Signal(bool, str, object, str)  # ok, track_id, text | None, error msg

    def __init__(self, client: CatalogClient, track_id: str, parent=None):
        super().__init__(parent)
        self.client = client
        self.track_id = track_id

    def run(self):
        self.progress.emit("Fetching lyrics...")
        logger.info("Fetching lyrics for track %s", self.track_id)
        try:
            text = self.client.get_lyrics(self.track_id)
        except CatalogError as e:
            logger.warning("Lyrics fetch failed for track %s: %s", self.track_id, e)
            self.finished_fetch.emit(False, self.track_id, None, str(e))
            return

        if text is None:
            logger.info("No lyrics available for track %s", self.track_id)
        self.finished_fetch.emit(True, self.track_id, text, "")
