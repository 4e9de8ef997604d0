"""Tests for the background lyrics fetch worker."""

from lrcplayer.core.catalog_client import CatalogError
from lrcplayer.ui.workers.lyrics_fetch_worker import LyricsFetchWorker


class FakeClient:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error

    def get_lyrics(self, track_id):
        if self.error:
            raise self.error
        return self.text


def _run(client, track_id="42"):
    results = []
    worker = LyricsFetchWorker(client, track_id)
    worker.finished_fetch.connect(lambda *args: results.append(args))
    worker.run()
    return results


class TestLyricsFetchWorker:
    """Runs the worker body synchronously."""

    def test_success(self, qapp) -> None:
        assert _run(FakeClient(text="[00:01.00]x")) == [(True, "42", "[00:01.00]x", "")]

    def test_no_lyrics(self, qapp) -> None:
        assert _run(FakeClient(text=None)) == [(True, "42", None, "")]

    def test_failure_is_reported_not_raised(self, qapp) -> None:
        results = _run(FakeClient(error=CatalogError("HTTP 500")))

        assert results == [(False, "42", None, "HTTP 500")]
