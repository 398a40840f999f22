"""Tests for the session loop."""

from unittest.mock import MagicMock

import pytest
from blessed.keyboard import Keystroke

from music_browser.context import AppContext
from music_browser.domain.navigation.state import NavigationState
from music_browser.domain.playback.session import PlaybackSession
from music_browser.domain.playback.status import Complete
from music_browser.ui.blessed.app import main_loop

TIMEOUT = Keystroke("")


class ScriptedTerminal:
    """Terminal double that replays keystrokes and records poll timeouts."""

    def __init__(self, keys, width=100, height=30):
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.timeouts = []
        self.clear = ""

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        return self.keys.pop(0) if self.keys else Keystroke("q")


@pytest.fixture
def music_dir(tmp_path):
    (tmp_path / "a.mp3").write_bytes(b"")
    return tmp_path


@pytest.fixture
def ctx(config, music_dir, output, clock):
    return AppContext(
        config=config,
        navigation=NavigationState.open(music_dir),
        playback=PlaybackSession(output, clock=clock),
    )


class TestMainLoop:
    """Test poll, dispatch, tick and render ordering."""

    def test_quit_stops_without_rendering(self, ctx):
        render = MagicMock()
        main_loop(ScriptedTerminal([Keystroke("q")]), ctx, render=render)
        render.assert_not_called()

    def test_polls_with_refresh_interval(self, ctx):
        ctx.config.ui.refresh_ms = 250
        term = ScriptedTerminal([TIMEOUT, TIMEOUT])

        main_loop(term, ctx, render=MagicMock())

        assert term.timeouts == [0.25, 0.25, 0.25]

    def test_renders_snapshot_each_tick(self, ctx):
        render = MagicMock()
        term = ScriptedTerminal([TIMEOUT, Keystroke("x"), TIMEOUT])

        main_loop(term, ctx, render=render)

        assert render.call_count == 3
        snapshot = render.call_args[0][1]
        assert snapshot.explorer_items == ("Go Back", "a.mp3")
        assert snapshot.explorer_index == 0

    def test_keys_are_dispatched(self, ctx):
        render = MagicMock()
        keys = [Keystroke(" "), Keystroke("\r", code=343, name="KEY_ENTER")]
        term = ScriptedTerminal([Keystroke("\x1b[A", code=259, name="KEY_UP")] + keys)

        ctx = main_loop(term, ctx, render=render)

        assert ctx.navigation.cursor == 1
        assert [t.display_name for t in ctx.playback.playlist] == ["a.mp3"]
        assert render.call_args[0][1].playlist_items == ("a.mp3",)

    def test_tick_runs_without_input(self, ctx, clock):
        ctx.playback.start_track(ctx.navigation.entries[0])
        clock.advance(61)

        ctx = main_loop(ScriptedTerminal([TIMEOUT]), ctx, render=MagicMock())

        assert isinstance(ctx.playback.status, Complete)
