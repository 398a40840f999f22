"""Tests for building the render snapshot from a live context."""

import pytest

from music_browser.context import AppContext
from music_browser.ui.blessed.state import GO_BACK_LABEL, create_snapshot


@pytest.fixture
def ctx(config, tmp_path, output):
    (tmp_path / "b.mp3").write_bytes(b"")
    (tmp_path / "a.wav").write_bytes(b"")
    config.music.sort_entries = True
    return AppContext.create(config, tmp_path, output)


class TestCreateSnapshot:
    def test_idle_snapshot(self, ctx, tmp_path):
        snapshot = create_snapshot(ctx)

        assert snapshot.current_dir == str(tmp_path)
        assert snapshot.explorer_items == (GO_BACK_LABEL, "a.wav", "b.mp3")
        assert snapshot.playlist_items == ()
        assert snapshot.playing_song is None
        assert snapshot.is_active is False
        assert snapshot.progress_text is None
        assert snapshot.volume == 1.0

    def test_playing_snapshot(self, ctx):
        track = ctx.navigation.entries[0]
        ctx.playback.append(track)
        ctx.playback.play_selected()

        snapshot = create_snapshot(ctx.with_feedback("hello"))

        assert snapshot.playlist_items == ("a.wav",)
        assert snapshot.playing_song == "a.wav"
        assert snapshot.is_active is True
        assert snapshot.is_playing is True
        assert snapshot.progress_text == "00:00 / 01:00"
        assert snapshot.feedback == "hello"

    def test_snapshot_is_detached(self, ctx):
        snapshot = create_snapshot(ctx)
        ctx.navigation.move_down()
        assert snapshot.explorer_index == 0
