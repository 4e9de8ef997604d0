# player/clock.py
from __future__ import annotations

import time
from typing import Optional, Protocol

from PySide6.QtCore import QObject, Qt, QTimer, Signal, Slot

from lrcplayer.core.display import DisplaySelection
from lrcplayer.core.session import LyricsSession


class PlaybackClock(Protocol):
    def current_time(self) -> float: ...
    def duration(self) -> Optional[float]: ...


class ClockAdapter(QObject):
    """
    Samples the playback clock at a bounded rate and drives a LyricsSession.

    Polling (instead of per-line timers) keeps seeking and rate changes
    trivial: every tick recomputes the selection from the current time.
    """
    ticked = Signal(float)   # seconds

    def __init__(self, clock: PlaybackClock, session: LyricsSession, interval_ms: int = 16, parent=None):
        super().__init__(parent)
        self.clock = clock
        self.session = session
        self.interval_ms = max(1, int(interval_ms))

        self._duration_known = False
        self._last_tick: float = 0.0

        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(self.interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        self._last_tick = 0.0
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def reset(self) -> None:
        """Forget the previous track's duration; call on every track change."""
        self._duration_known = False

    @Slot(float)
    def on_duration_changed(self, seconds: float) -> None:
        if seconds and seconds > 0:
            self._duration_known = True
            self.session.set_duration(seconds)

    def _on_timeout(self) -> None:
        # timer events can bunch up after a stall; keep the rate capped
        now = time.monotonic()
        if (now - self._last_tick) * 1000 < self.interval_ms * 0.5:
            return
        self._last_tick = now
        self.sample()

    def sample(self) -> DisplaySelection:
        if not self._duration_known:
            duration = self.clock.duration()
            if duration is not None and duration > 0:
                self.on_duration_changed(duration)

        t = self.clock.current_time()
        selection = self.session.tick(t)
        self.ticked.emit(t)
        return selection
