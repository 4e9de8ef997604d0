import logging

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLineEdit, QHBoxLayout, QPushButton, QListWidget,
    QSplitter, QAbstractSpinBox, QTextEdit, QPlainTextEdit
)
from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QShortcut, QKeySequence, QDesktopServices

from lrcplayer.player.clock import ClockAdapter
from lrcplayer.player.player import NowPlaying
from lrcplayer.ui.lyrics_view import LyricsView
from lrcplayer.ui.player_bar import PlayerBar
from lrcplayer.ui.workers.catalog_workers import SearchWorker, TrackInfoWorker
from lrcplayer.ui.workers.lyrics_fetch_worker import LyricsFetchWorker

logger = logging.getLogger(__name__)

SEEK_STEP_S = 10.0
VOLUME_STEP = 0.1


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("LrcPlayer")
        self.resize(900, 600)
        self.app_state = app_state
        self.session = app_state.session
        self.client = app_state.client
        self.player = app_state.player

        self._workers: set = set()
        self._queue_ids: list[str] = []
        self._queue_index: int = -1
        self.shortcuts: dict[str, QShortcut] = {}

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        self.app_state.notification.connect(self._on_notify)

        # --- Top controls (search + track id) ---
        top_bar = QHBoxLayout()

        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText("Search tracks...")
        self.search_box.returnPressed.connect(self._search_from_box)
        top_bar.addWidget(self.search_box, stretch=2)

        self.track_box = QLineEdit()
        self.track_box.setPlaceholderText("Track ID...")
        self.track_box.returnPressed.connect(self._load_from_box)
        top_bar.addWidget(self.track_box, stretch=1)

        self.btn_load = QPushButton("Play")
        self.btn_load.clicked.connect(self._load_from_box)
        top_bar.addWidget(self.btn_load)

        self.btn_reload = QPushButton("Reload lyrics")
        self.btn_reload.setToolTip("Fetch the lyrics of the current track again")
        self.btn_reload.clicked.connect(self.reload_lyrics)
        top_bar.addWidget(self.btn_reload)

        self.btn_download = QPushButton("Download")
        self.btn_download.setToolTip("Download the current track")
        self.btn_download.clicked.connect(self.download_current)
        top_bar.addWidget(self.btn_download)

        self.layout.addLayout(top_bar)

        # --- Results + lyrics ---
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.results = QListWidget()
        self.results.itemActivated.connect(lambda item: self.play_queue_index(self.results.row(item)))
        splitter.addWidget(self.results)

        self.lyrics_view = LyricsView()
        splitter.addWidget(self.lyrics_view)
        self.session.add_listener(self.lyrics_view.show_selection)

        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 3)
        self.layout.addWidget(splitter, 1)

        # --- Player ---
        interval_ms = app_state.config.tick_interval_ms if app_state.config else 16
        self.clock = ClockAdapter(self.player, self.session, interval_ms=interval_ms, parent=self)

        self.player_bar = PlayerBar(self.player, self)
        self.layout.addWidget(self.player_bar)

        if self.player:
            self.player.durationChanged.connect(self.clock.on_duration_changed)
            self.player.errorOccurred.connect(lambda msg: self.app_state.notify(f"Playback error: {msg}", "error"))
            self.lyrics_view.seekRequested.connect(self.player.seek)

        # --- Shortcuts ---
        self._add_shortcut("Space", self.toggle_play_pause)
        self._add_shortcut("Shift+Right", lambda: self.seek_by(SEEK_STEP_S))
        self._add_shortcut("Shift+Left", lambda: self.seek_by(-SEEK_STEP_S))
        self._add_shortcut("Shift+Up", lambda: self.change_volume(VOLUME_STEP))
        self._add_shortcut("Shift+Down", lambda: self.change_volume(-VOLUME_STEP))
        self._add_shortcut("Ctrl+N", self.play_next)
        self._add_shortcut("Ctrl+P", self.play_prev)

        self.show_queued_notifications()

    def _add_shortcut(self, keys: str, handler):
        shortcut = QShortcut(QKeySequence(keys), self)
        shortcut.activated.connect(lambda: None if self._typing() else handler())
        self.shortcuts[keys] = shortcut

    @staticmethod
    def _typing() -> bool:
        return isinstance(QApplication.focusWidget(), (QLineEdit, QTextEdit, QPlainTextEdit, QAbstractSpinBox))

    # --- playback controls ---
    def toggle_play_pause(self):
        if self.player:
            self.player.toggle_play_pause()

    def seek_by(self, delta_s: float):
        if not self.player or not self.player.track:
            return
        target = max(0.0, self.player.current_time() + delta_s)
        duration = self.player.duration()
        if duration:
            target = min(target, duration)
        self.player.seek(target)

    def change_volume(self, delta: float):
        if self.player:
            self.player.set_volume(self.player.volume() + delta)

    def download_current(self):
        track_id = self.session.track_id
        if not track_id:
            self.app_state.notify("No track playing.", "warning")
            return
        QDesktopServices.openUrl(QUrl(self.client.download_url(track_id)))

    # --- search / queue ---
    def _search_from_box(self):
        self.search(self.search_box.text())

    def search(self, query: str):
        query = (query or "").strip()
        if not query:
            return
        worker = SearchWorker(self.client, query, parent=self)
        worker.finished_search.connect(self._on_search_finished)
        self._start_worker(worker)

    def _on_search_finished(self, ok: bool, query: str, track_ids, msg: str):
        if query != self.search_box.text().strip():
            return
        if not ok:
            self.app_state.notify(f"Search failed: {msg}", "error")
            return
        self._queue_ids = list(track_ids)
        self._queue_index = -1
        self.results.clear()
        self.results.addItems(self._queue_ids)
        if not self._queue_ids:
            self.app_state.notify("No results.", "info")

    def play_queue_index(self, index: int):
        if 0 <= index < len(self._queue_ids):
            self._queue_index = index
            self.results.setCurrentRow(index)
            self.load_track(self._queue_ids[index])

    def play_next(self):
        self.play_queue_index(self._queue_index + 1)

    def play_prev(self):
        self.play_queue_index(self._queue_index - 1)

    # --- track loading ---
    def _load_from_box(self):
        self.load_track(self.track_box.text())

    def load_track(self, track_id: str):
        track_id = (track_id or "").strip()
        if not track_id:
            self.app_state.notify("Enter a track ID first.", "warning")
            return
        if not self.player:
            self.app_state.notify("Audio player unavailable.", "error")
            return

        self.clock.stop()
        self.clock.reset()
        self.session.begin_load(track_id)

        # title is filled in by TrackInfoWorker
        meta = NowPlaying(
            track_id=track_id,
            title=track_id,
            artist=None,
            stream_url=self.client.stream_url(track_id),
            cover_url=self.client.cover_url(track_id),
        )
        self.player.play_track(meta)
        self.app_state.track_changed.emit(meta)

        self._start_track_info_fetch(track_id)
        self._start_lyrics_fetch(track_id)
        self.clock.start()

    def reload_lyrics(self):
        track_id = self.session.track_id
        if not track_id:
            self.app_state.notify("No track playing.", "warning")
            return
        duration = self.session.duration
        self.session.begin_load(track_id)
        self.session.set_duration(duration)
        self._start_lyrics_fetch(track_id)

    def unload_track(self):
        self.clock.stop()
        self.clock.reset()
        self.session.unload()
        if self.player:
            self.player.unload()
        self.app_state.track_changed.emit(None)

    def _start_track_info_fetch(self, track_id: str):
        worker = TrackInfoWorker(self.client, track_id, parent=self)
        worker.finished_fetch.connect(self._on_track_info_fetched)
        self._start_worker(worker)

    def _on_track_info_fetched(self, ok: bool, track_id: str, meta, msg: str):
        if track_id != self.session.track_id:
            return
        if not ok:
            self.app_state.notify(f"Could not load track info: {msg}", "warning")
            return
        if self.player:
            self.player.update_track_info(track_id, meta["title"], meta["artist"])
            self.app_state.track_changed.emit(self.player.track)

    def _start_lyrics_fetch(self, track_id: str):
        worker = LyricsFetchWorker(self.client, track_id, parent=self)
        worker.progress.connect(lambda s: self.statusBar().showMessage(s, 2000))
        worker.finished_fetch.connect(self._on_lyrics_fetched)
        self._start_worker(worker)

    def _on_lyrics_fetched(self, ok: bool, track_id: str, text, msg: str):
        if ok:
            self.session.apply_lyrics(track_id, text)
            return
        if self.session.lyrics_failed(track_id, msg):
            self.app_state.notify("Lyrics could not be loaded.", "warning")

    def _start_worker(self, worker):
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        worker.finished.connect(worker.deleteLater)
        self._workers.add(worker)
        worker.start()

    def _wait_for_workers(self):
        # a running QThread must not be destroyed with the window
        for worker in list(self._workers):
            worker.wait()
        self._workers.clear()

    # --- notifications ---
    def _on_notify(self, n):
        msg = getattr(n, "message", str(n))
        kind = (getattr(n, "notify_type", "info") or "info").lower()
        timeout = 6000 if kind in ("warning", "error") else 3000
        self.statusBar().showMessage(msg, timeout)

    def show_queued_notifications(self):
        queued = list(self.app_state.queued_notifications)
        self.app_state.queued_notifications.clear()
        for n in queued:
            self._on_notify(n)

    def closeEvent(self, event):
        self.clock.stop()
        self.session.unload()
        if self.player:
            self.player.stop()
        self._wait_for_workers()
        super().closeEvent(event)
