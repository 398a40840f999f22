"""Tests for layout math and frame composition."""

import io
import random
from dataclasses import replace

import pytest
from blessed import Terminal

from music_browser.ui.blessed.components.box import render_box
from music_browser.ui.blessed.helpers import center, display_width, fit
from music_browser.ui.blessed.components.layout import calculate_layout, compose_frame
from music_browser.ui.blessed.components.lists import render_explorer, render_playlist
from music_browser.ui.blessed.components.progress import (
    NO_SOUND_LABEL,
    WAVE_BARS,
    gauge,
    render_progress,
    render_wave,
    wave_levels,
)
from music_browser.ui.blessed.state import SessionSnapshot


@pytest.fixture
def term():
    return Terminal(stream=io.StringIO(), force_styling=None)


@pytest.fixture
def snapshot():
    return SessionSnapshot(
        current_dir="/music",
        explorer_items=("Go Back", "Album", "a.mp3"),
        explorer_index=0,
        playlist_items=(),
        playlist_index=0,
        playing_song=None,
        is_active=False,
        is_playing=False,
        progress_text=None,
        progress_ratio=0.0,
        volume=1.0,
    )


class TestLayout:
    """Test the column and row split."""

    def test_calculate_layout(self):
        layout = calculate_layout(100, 30)
        assert (layout["left_width"], layout["mid_width"], layout["right_width"]) == (20, 60, 20)
        assert layout["body_y"] == 3
        assert layout["body_height"] == 26
        assert layout["wave_height"] == 23
        assert layout["progress_height"] == 3
        assert layout["status_y"] == 29

    def test_widths_always_sum_to_terminal(self):
        for width in (7, 33, 81, 119):
            layout = calculate_layout(width, 20)
            assert layout["left_width"] + layout["mid_width"] + layout["right_width"] == width

    def test_tiny_terminal(self):
        layout = calculate_layout(10, 2)
        assert layout["body_height"] == 0
        assert layout["wave_height"] == 0


class TestBox:
    """Test bordered panels."""

    def test_box_dimensions(self):
        lines = render_box("Explorer", [("row", None)], 20, 5)
        assert len(lines) == 5
        assert all(len(line) == 20 for line in lines)
        assert "Explorer" in lines[0]
        assert lines[1] == "│" + "row".ljust(18) + "│"

    def test_long_rows_are_truncated(self):
        lines = render_box("", [("x" * 50, None)], 10, 3)
        assert lines[1] == "│xxxxxxx…│"


class TestDisplayWidth:
    """Test that wide characters are measured in screen columns."""

    def test_wide_characters_count_two_columns(self):
        assert display_width("abc") == 3
        assert display_width("日本語") == 6
        assert display_width("🎵") == 2

    def test_fit_pads_wide_text_by_columns(self):
        assert fit("歌.mp3", 8) == "歌.mp3  "

    def test_fit_truncates_wide_text_by_columns(self):
        result = fit("日本語の歌.mp3", 8)
        assert result == "日本語… "
        assert display_width(result) == 8

    def test_center_wide_text(self):
        result = center("日本", 8, "─")
        assert result == "──日本──"

    def test_box_with_wide_rows_stays_aligned(self):
        rows = [("日本語の歌.mp3", None), ("🎵 mix.flac", None), ("plain.wav", None)]
        lines = render_box("Playlist", rows, 12, 5)
        assert all(display_width(line) == 12 for line in lines)


class TestPanels:
    """Test list, gauge and wave rendering."""

    def test_explorer_highlights_cursor(self, term, snapshot):
        lines = render_explorer(term, replace(snapshot, explorer_index=1), 20, 6, use_colors=False)
        assert lines[1].startswith("│  Go Back")
        assert lines[2].startswith("│> Album")

    def test_empty_playlist_has_no_highlight(self, term, snapshot):
        lines = render_playlist(term, snapshot, 20, 6, use_colors=False)
        assert not any(">" in line for line in lines)

    def test_gauge_parts(self):
        head, filled, empty = gauge("VOL", 0.5, 14)
        assert head == "VOL "
        assert len(filled) == 5
        assert len(empty) == 5

    def test_gauge_ratio_clamped(self):
        _, filled, empty = gauge("", 3.0, 10)
        assert empty == ""

    def test_idle_progress_label(self, term, snapshot):
        lines = render_progress(term, snapshot, 60, use_colors=False)
        assert NO_SOUND_LABEL in lines[1]
        assert "VOL" in lines[1]

    def test_active_progress_label(self, term, snapshot):
        active = replace(snapshot, is_active=True, progress_text="01:05 / 02:05", progress_ratio=0.52)
        lines = render_progress(term, active, 60, use_colors=False)
        assert "01:05 / 02:05" in lines[1]
        assert NO_SOUND_LABEL not in lines[1]

    def test_wave_flat_when_not_playing(self):
        assert wave_levels(False) == [0] * WAVE_BARS

    def test_wave_levels_in_range(self):
        levels = wave_levels(True, random.Random(7))
        assert len(levels) == WAVE_BARS
        assert all(0 <= level < 10 for level in levels)

    def test_wave_has_no_bars_when_idle(self, term, snapshot):
        lines = render_wave(term, snapshot, 60, 12, use_colors=False)
        assert not any("█" in line for line in lines)


class TestFrame:
    """Test full frame composition."""

    def test_frame_fills_terminal(self, term, snapshot):
        lines = compose_frame(term, snapshot, 100, 30, use_colors=False)
        assert len(lines) == 30
        assert all(display_width(line) == 100 for line in lines)

    def test_frame_shows_header_and_feedback(self, term, snapshot):
        snap = replace(snapshot, playing_song="a.mp3", feedback="Cannot play b.mp3")
        lines = compose_frame(term, snap, 100, 30, use_colors=False)
        assert "/music" in lines[1]
        assert "a.mp3" in lines[1]
        assert lines[-1].startswith("Cannot play b.mp3")

    def test_frame_with_wide_names_fills_terminal(self, term, snapshot):
        snap = replace(
            snapshot,
            explorer_items=("Go Back", "日本語のアルバム", "🎵🎵🎵.mp3"),
            playlist_items=("夜に駆ける.flac",),
            playing_song="夜に駆ける.flac",
        )
        lines = compose_frame(term, snap, 100, 30, use_colors=False)
        assert all(display_width(line) == 100 for line in lines)

    def test_frame_without_wave(self, term, snapshot):
        lines = compose_frame(term, snapshot, 100, 30, use_colors=False, show_wave=False)
        assert len(lines) == 30
        assert not any("Wave" in line for line in lines)

    def test_tiny_frame_does_not_fail(self, term, snapshot):
        lines = compose_frame(term, snapshot, 8, 3, use_colors=False)
        assert len(lines) <= 3
