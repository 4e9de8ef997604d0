# core/session.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from lrcplayer.core.display import (
    DEFAULT_THRESHOLDS,
    EMPTY,
    LOADING,
    DisplaySelection,
    DisplayThresholds,
    select_display,
)
from lrcplayer.core.gaps import Gap, detect_gaps
from lrcplayer.core.lrc import LyricLine, parse_lrc

logger = logging.getLogger(__name__)

SelectionListener = Callable[[DisplaySelection], None]


class LyricsSession:
    """
    Lyrics state for the currently loaded track.

    Owns the parsed lines and the gap list, rebuilds them on every load and
    turns clock ticks into DisplaySelection values. Results for a track that
    is no longer loaded are dropped.
    """

    def __init__(self, thresholds: DisplayThresholds = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

        self.track_id: Optional[str] = None
        self.lines: List[LyricLine] = []
        self.gaps: List[Gap] = []
        self.duration: Optional[float] = None
        self.loading: bool = False
        self.last_time: float = 0.0

        self._gaps_computed: bool = False
        self._selection: DisplaySelection = EMPTY
        self._listeners: List[SelectionListener] = []

    # --- listeners ---
    def add_listener(self, callback: SelectionListener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: SelectionListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    @property
    def selection(self) -> DisplaySelection:
        return self._selection

    # --- track lifecycle ---
    def begin_load(self, track_id: str) -> None:
        """Switch to `track_id`; lyrics are pending until apply_lyrics()."""
        self._reset()
        self.track_id = track_id
        self.loading = True
        self._publish(LOADING)

    def apply_lyrics(self, track_id: str, raw_text: Optional[str]) -> bool:
        if not self._is_current(track_id):
            return False

        self.loading = False
        self.lines = parse_lrc(raw_text)
        self._gaps_computed = False
        self.gaps = []
        if self.duration:
            self._recompute_gaps()

        logger.debug("Loaded %d lyric lines for track %s", len(self.lines), track_id)
        self.tick(self.last_time)
        return True

    def lyrics_failed(self, track_id: str, reason: str = "") -> bool:
        if not self._is_current(track_id):
            return False

        logger.warning("Lyrics unavailable for track %s: %s", track_id, reason or "unknown error")
        self.loading = False
        self.lines = []
        self.gaps = []
        self._gaps_computed = False
        self._publish(EMPTY)
        return True

    def set_duration(self, duration: Optional[float]) -> None:
        """Record the track duration; gaps are computed once it is first known."""
        if duration is None or not duration > 0:
            return
        self.duration = float(duration)
        if self.lines and not self._gaps_computed:
            self._recompute_gaps()

    def unload(self) -> None:
        self._reset()
        self._publish(EMPTY)

    # --- clock ---
    def tick(self, current_time: float) -> DisplaySelection:
        self.last_time = current_time
        if self.loading:
            selection = LOADING
        else:
            selection = select_display(self.lines, self.gaps, current_time, self.thresholds)
        self._publish(selection)
        return selection

    # --- internal helpers ---
    def _is_current(self, track_id: str) -> bool:
        if track_id != self.track_id:
            logger.debug("Dropping stale lyrics result for track %s (loaded: %s)", track_id, self.track_id)
            return False
        return True

    def _recompute_gaps(self) -> None:
        self.gaps = detect_gaps(self.lines, self.duration)
        self._gaps_computed = True
        logger.debug("Detected %d gaps (duration %.2fs)", len(self.gaps), self.duration or 0.0)

    def _reset(self) -> None:
        self.track_id = None
        self.lines = []
        self.gaps = []
        self.duration = None
        self.loading = False
        self.last_time = 0.0
        self._gaps_computed = False

    def _publish(self, selection: DisplaySelection) -> None:
        if selection == self._selection:
            return
        self._selection = selection
        for callback in list(self._listeners):
            callback(selection)
