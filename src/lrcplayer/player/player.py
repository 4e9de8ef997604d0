# player/player.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

logger = logging.getLogger(__name__)

class PlayerStatus(Enum):
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()

@dataclass
class NowPlaying:
    track_id: str
    title: str
    artist: str | None
    stream_url: str
    cover_url: str | None = None

class Player(QObject):
    """
    Streams catalog tracks through QMediaPlayer.

    Doubles as the playback clock: current_time()/duration() are in seconds,
    and durationChanged fires once the media metadata is loaded.
    """
    statusChanged = Signal(object)      # PlayerStatus
    positionChanged = Signal(float)     # seconds
    durationChanged = Signal(float)     # seconds
    trackChanged = Signal(object)       # NowPlaying | None
    ended = Signal()
    errorOccurred = Signal(str)

    def __init__(self):
        super().__init__()

        self.status = PlayerStatus.STOPPED
        self.track: NowPlaying | None = None

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)

        # Default volume (0.0 - 1.0)
        self._volume_0_to_1: float = 0.7
        self.audio.setVolume(self._volume_0_to_1)

        self.media.positionChanged.connect(lambda ms: self.positionChanged.emit(ms / 1000.0))
        self.media.durationChanged.connect(self._on_qt_duration)
        self.media.playbackStateChanged.connect(self._on_qt_state_changed)
        self.media.mediaStatusChanged.connect(self._on_qt_media_status)
        self.media.errorOccurred.connect(self._on_qt_error)

    # ----------------------------
    # Qt backend handlers
    # ----------------------------

    def _on_qt_duration(self, ms: int) -> None:
        if ms > 0:
            self.durationChanged.emit(ms / 1000.0)

    def _on_qt_state_changed(self, state: QMediaPlayer.PlaybackState) -> None:
        if state == QMediaPlayer.PlayingState:
            self._set_status(PlayerStatus.PLAYING)
        elif state == QMediaPlayer.PausedState:
            self._set_status(PlayerStatus.PAUSED)
        else:
            self._set_status(PlayerStatus.STOPPED)

    def _on_qt_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.EndOfMedia:
            self._set_status(PlayerStatus.STOPPED)
            self.ended.emit()

    def _on_qt_error(self, _error, message: str) -> None:
        logger.error("Playback error: %s", message)
        self.errorOccurred.emit(message)

    def _set_status(self, new_status: PlayerStatus) -> None:
        if self.status != new_status:
            self.status = new_status
            self.statusChanged.emit(self.status)

    # ----------------------------
    # Public API
    # ----------------------------

    def play_track(self, meta: NowPlaying) -> None:
        self.track = meta
        self.trackChanged.emit(self.track)

        self.media.setSource(QUrl(meta.stream_url))
        self.media.play()

    def play(self) -> None:
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def stop(self) -> None:
        self.media.stop()

    def unload(self) -> None:
        self.media.stop()
        self.media.setSource(QUrl())
        self.track = None
        self.trackChanged.emit(None)

    def update_track_info(self, track_id: str, title: str, artist: str | None) -> None:
        if not self.track or self.track.track_id != track_id:
            return
        self.track.title = title
        self.track.artist = artist
        self.trackChanged.emit(self.track)

    def toggle_play_pause(self) -> None:
        if self.media.playbackState() == QMediaPlayer.PlayingState:
            self.pause()
        else:
            self.play()

    def seek(self, seconds: float) -> None:
        self.media.setPosition(max(0, int(round(seconds * 1000))))

    def set_volume(self, volume_0_to_1: float) -> None:
        v = min(1.0, max(0.0, float(volume_0_to_1)))
        self._volume_0_to_1 = v
        self.audio.setVolume(v)

    def volume(self) -> float:
        return self._volume_0_to_1

    # clock interface read by ClockAdapter
    def current_time(self) -> float:
        return self.media.position() / 1000.0

    def duration(self) -> Optional[float]:
        ms = self.media.duration()
        return ms / 1000.0 if ms > 0 else None
