"""Tests for application state notifications."""

from lrcplayer.core.state import AppState, Notify


def test_notify_emits_notification(qapp) -> None:
    seen = []
    state = AppState()
    state.notification.connect(seen.append)

    state.notify("Lyrics could not be loaded.", "warning")

    assert seen == [Notify(message="Lyrics could not be loaded.", notify_type="warning")]
