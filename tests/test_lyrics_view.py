"""Tests for the lyrics view widget."""

import pytest

from lrcplayer.core.display import EMPTY, LOADING, DisplaySelection, DisplayState
from lrcplayer.core.gaps import Gap
from lrcplayer.core.lrc import LyricLine
from lrcplayer.ui.lyrics_view import EMPTY_TEXT, LOADING_TEXT, LyricsView

A = LyricLine(1.0, "a")
B = LyricLine(2.0, "b")
C = LyricLine(9.0, "c")


@pytest.fixture
def view(qapp):
    return LyricsView()


class TestLyricsView:
    """Tests for LyricsView."""

    def test_placeholders(self, view) -> None:
        view.show_selection(LOADING)
        assert view.stack.currentWidget() is view.msg
        assert view.msg.text() == LOADING_TEXT

        view.show_selection(EMPTY)
        assert view.msg.text() == EMPTY_TEXT

    def test_three_lines(self, view) -> None:
        view.show_selection(DisplaySelection(DisplayState.LYRIC_ACTIVE, past=A, current=B, next=C))

        assert view.stack.currentWidget() is view.lines_page
        assert (view.lbl_past.text(), view.lbl_current.text(), view.lbl_next.text()) == ("a", "b", "c")
        assert view.lbl_gap.isHidden()

    def test_gap_replaces_current(self, view) -> None:
        view.show_selection(DisplaySelection(DisplayState.LYRIC_ACTIVE, past=A, next=C, gap=Gap(2.0, 9.0)))

        assert not view.lbl_gap.isHidden()
        assert view.lbl_current.isHidden()

    def test_click_seeks_to_synced_line(self, view) -> None:
        seeks = []
        view.seekRequested.connect(seeks.append)
        view.show_selection(DisplaySelection(DisplayState.LYRIC_ACTIVE, past=A, current=B, next=C))

        view._on_line_clicked("next")

        assert seeks == [9.0]

    def test_click_ignored_for_plain_lyrics(self, view) -> None:
        seeks = []
        view.seekRequested.connect(seeks.append)
        view.show_selection(DisplaySelection(DisplayState.UNSYNCHRONIZED, current=LyricLine(0.0, "x")))

        view._on_line_clicked("current")

        assert seeks == []
