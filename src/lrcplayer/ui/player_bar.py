# ui/player_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QToolButton, QSlider, QStyle

def _fmt(seconds: float) -> str:
    s = max(0, int(seconds))
    return f"{s // 60}:{s % 60:02d}"

class PlayerBar(QWidget):
    def __init__(self, player, parent=None):
        super().__init__(parent)
        self.player = player

        self._dragging = False

        root = QHBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(10)

        self.btn_play = QToolButton()
        self.btn_play.setObjectName("BtnPlay")
        self.btn_play.setIconSize(QSize(22, 22))
        self._set_playing(False)

        self.lbl_title = QLabel("Nothing playing")
        self.lbl_title.setMinimumWidth(220)
        self.lbl_title.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_title.setObjectName("NowPlaying")

        self.lbl_time = QLabel("0:00")
        self.lbl_dur = QLabel("0:00")

        # slider works in milliseconds, labels in seconds
        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, 0)
        self.slider.setSingleStep(1000)
        self.slider.setPageStep(5000)

        root.addWidget(self.btn_play)
        root.addSpacing(6)
        root.addWidget(self.lbl_title, 1)
        root.addWidget(self.lbl_time)
        root.addWidget(self.slider, 3)
        root.addWidget(self.lbl_dur)

        self.slider.sliderPressed.connect(self._on_slider_pressed)
        self.slider.sliderReleased.connect(self._on_slider_released)
        self.slider.sliderMoved.connect(lambda ms: self.lbl_time.setText(_fmt(ms / 1000)))

        if self.player:
            self.player.trackChanged.connect(self._on_track_changed)
            self.player.statusChanged.connect(self._on_status_changed)
            self.player.positionChanged.connect(self._on_position)
            self.player.durationChanged.connect(self._on_duration)
            self.btn_play.clicked.connect(self.player.toggle_play_pause)

        self.setObjectName("PlayerBar")
        self.setStyleSheet("""
        QWidget#PlayerBar { background-color: #020617; border-top: 1px solid #111827; }
        QLabel { color: #9ca3af; font-size: 11px; }
        QLabel#NowPlaying { color: #e5e7eb; font-size: 12px; }
        QSlider::groove:horizontal { height: 4px; background: #0f172a; border-radius: 2px; }
        QSlider::sub-page:horizontal { background: #38bdf8; border-radius: 2px; }
        """)

    # --- slider handling ---
    def _on_slider_pressed(self):
        self._dragging = True

    def _on_slider_released(self):
        self._dragging = False
        if self.player:
            self.player.seek(self.slider.value() / 1000.0)

    # --- player updates ---
    def _on_track_changed(self, now_playing):
        if now_playing:
            artist = now_playing.artist or "Unknown Artist"
            title = now_playing.title or "Unknown"
            self.lbl_title.setText(f"{artist} — {title}")
        else:
            self.lbl_title.setText("Nothing playing")
            self.slider.setRange(0, 0)
            self.lbl_time.setText("0:00")
            self.lbl_dur.setText("0:00")
            self._set_playing(False)

    def _on_status_changed(self, status):
        self._set_playing(getattr(status, "name", "") == "PLAYING")

    def _set_playing(self, playing: bool):
        icon = QStyle.StandardPixmap.SP_MediaPause if playing else QStyle.StandardPixmap.SP_MediaPlay
        self.btn_play.setIcon(self.style().standardIcon(icon))
        self.btn_play.setToolTip("Pause" if playing else "Play")

    def _on_duration(self, seconds: float):
        self.slider.setRange(0, max(0, int(seconds * 1000)))
        self.lbl_dur.setText(_fmt(seconds))

    def _on_position(self, seconds: float):
        if self._dragging:
            return
        self.lbl_time.setText(_fmt(seconds))
        self.slider.setValue(int(seconds * 1000))
