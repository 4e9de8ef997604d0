# ui/lyrics_view.py
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QStackedWidget, QVBoxLayout, QWidget

from lrcplayer.core.display import DisplaySelection, DisplayState
from lrcplayer.core.lrc import LyricLine

LOADING_TEXT = "Loading lyrics..."
EMPTY_TEXT = "No lyrics available for this track"
GAP_DOTS = "•  •  •"


class _LineLabel(QLabel):
    clicked = Signal()

    def __init__(self, object_name: str, parent=None):
        super().__init__(parent)
        self.setObjectName(object_name)
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)

    def mousePressEvent(self, event):
        self.clicked.emit()
        super().mousePressEvent(event)


class LyricsView(QWidget):
    """
    Three-line lyrics window:
      - past line (dimmed)
      - current line, or gap dots while waiting through a long silence
      - next line

    A message page replaces the lines while loading or when there are no
    lyrics. Clicking a synchronized line seeks to it.
    """
    seekRequested = Signal(float)   # seconds

    def __init__(self, parent=None):
        super().__init__(parent)

        self._selection: Optional[DisplaySelection] = None
        self._slot_lines: dict[str, Optional[LyricLine]] = {"past": None, "current": None, "next": None}

        root = QVBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)

        self.stack = QStackedWidget()
        root.addWidget(self.stack, 1)

        self.msg = QLabel(EMPTY_TEXT)
        self.msg.setObjectName("LyricsMessage")
        self.msg.setAlignment(Qt.AlignCenter)
        self.msg.setWordWrap(True)
        self.stack.addWidget(self.msg)

        self.lines_page = QWidget()
        lines_layout = QVBoxLayout(self.lines_page)
        lines_layout.setSpacing(18)
        lines_layout.addStretch(1)

        self.lbl_past = _LineLabel("LyricPast")
        self.lbl_current = _LineLabel("LyricCurrent")
        self.lbl_gap = _LineLabel("LyricGap")
        self.lbl_gap.setText(GAP_DOTS)
        self.lbl_next = _LineLabel("LyricNext")

        for slot, label in (("past", self.lbl_past), ("current", self.lbl_current), ("next", self.lbl_next)):
            label.clicked.connect(lambda s=slot: self._on_line_clicked(s))

        lines_layout.addWidget(self.lbl_past)
        lines_layout.addWidget(self.lbl_gap)
        lines_layout.addWidget(self.lbl_current)
        lines_layout.addWidget(self.lbl_next)
        lines_layout.addStretch(1)
        self.stack.addWidget(self.lines_page)

        self.setObjectName("LyricsView")
        self._apply_styles()
        self.show_message(EMPTY_TEXT)

    # --- public API ---
    def show_message(self, message: str):
        self._selection = None
        self._slot_lines = {"past": None, "current": None, "next": None}
        self.msg.setText(message)
        self.stack.setCurrentWidget(self.msg)

    def show_selection(self, selection: DisplaySelection):
        if selection == self._selection:
            return

        if selection.state == DisplayState.LOADING:
            self.show_message(LOADING_TEXT)
            self._selection = selection
            return
        if selection.state == DisplayState.EMPTY:
            self.show_message(EMPTY_TEXT)
            self._selection = selection
            return

        self._selection = selection
        self._slot_lines = {"past": selection.past, "current": selection.current, "next": selection.next}

        self._set_line(self.lbl_past, selection.past)
        self._set_line(self.lbl_current, selection.current)
        self._set_line(self.lbl_next, selection.next)
        self.lbl_gap.setVisible(selection.gap is not None)

        synced = selection.state != DisplayState.UNSYNCHRONIZED
        cursor = Qt.PointingHandCursor if synced else Qt.ArrowCursor
        for label in (self.lbl_past, self.lbl_current, self.lbl_next):
            label.setCursor(cursor)

        self.stack.setCurrentWidget(self.lines_page)

    # --- internal helpers ---
    def _set_line(self, label: QLabel, line: Optional[LyricLine]):
        label.setText(line.text if line else "")
        label.setVisible(line is not None)

    def _on_line_clicked(self, slot: str):
        line = self._slot_lines.get(slot)
        if line is None or line.time <= 0:
            return
        self.seekRequested.emit(line.time)

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#LyricsView { background-color: #020617; }
        QLabel#LyricsMessage { color: #6b7280; font-size: 14px; }
        QLabel#LyricPast { color: #4b5563; font-size: 16px; }
        QLabel#LyricCurrent { color: #f9fafb; font-size: 24px; font-weight: 650; }
        QLabel#LyricNext { color: #9ca3af; font-size: 16px; }
        QLabel#LyricGap { color: #38bdf8; font-size: 24px; }
        """)
