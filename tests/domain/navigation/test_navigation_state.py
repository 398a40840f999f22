"""Tests for explorer navigation state."""

from pathlib import Path

import pytest

from music_browser.domain.library.exceptions import DirectoryReadError
from music_browser.domain.library.models import Track
from music_browser.domain.navigation import state
from music_browser.domain.navigation.state import (
    EnterDirectory,
    GoUp,
    NavigationState,
    SelectFile,
)


@pytest.fixture
def music_dir(tmp_path):
    root = tmp_path / "music"
    root.mkdir()
    (root / "Album").mkdir()
    (root / "Album" / "01.flac").write_bytes(b"")
    (root / "b.mp3").write_bytes(b"")
    (root / "cover.jpg").write_bytes(b"")
    return root


@pytest.fixture
def nav(music_dir):
    return NavigationState.open(music_dir, sort_entries=True)


class TestCursor:
    """Test cursor movement over the go-up row plus entries."""

    def test_open_lists_directory(self, nav, music_dir):
        assert nav.current_dir == music_dir
        assert [e.display_name for e in nav.entries] == ["Album", "b.mp3"]
        assert nav.cursor == 0

    def test_cursor_domain_includes_go_up_row(self, nav):
        nav.move_down()
        nav.move_down()
        assert nav.cursor == 2
        nav.move_down()
        assert nav.cursor == 0

    def test_cursor_wraps_upward(self, nav):
        nav.move_up()
        assert nav.cursor == len(nav.entries)

    def test_empty_directory_cursor_stays_on_go_up(self, tmp_path):
        nav = NavigationState.open(tmp_path)
        nav.move_down()
        assert nav.cursor == 0
        nav.move_up()
        assert nav.cursor == 0


class TestSelection:
    """Test resolving and activating the row under the cursor."""

    def test_selected_resolves_rows(self, nav, music_dir):
        assert nav.selected() == GoUp()
        nav.move_down()
        assert nav.selected() == EnterDirectory(music_dir / "Album")
        nav.move_down()
        assert nav.selected() == SelectFile(Track("b.mp3", music_dir / "b.mp3"))

    def test_selected_has_no_side_effects(self, nav, music_dir):
        nav.move_down()
        nav.selected()
        assert nav.current_dir == music_dir
        assert nav.cursor == 1

    def test_enter_directory_resets_cursor(self, nav, music_dir):
        nav.move_down()
        selection = nav.activate_selection()

        assert selection == EnterDirectory(music_dir / "Album")
        assert nav.current_dir == music_dir / "Album"
        assert [e.display_name for e in nav.entries] == ["01.flac"]
        assert nav.cursor == 0

    def test_go_up_lists_parent(self, nav, music_dir):
        nav.move_down()
        nav.activate_selection()

        selection = nav.activate_selection()

        assert selection == GoUp()
        assert nav.current_dir == music_dir
        assert nav.cursor == 0

    def test_go_up_at_root_is_noop(self, tmp_path):
        root = Path(tmp_path.anchor)
        nav = NavigationState(root)

        assert nav.activate_selection() == GoUp()
        assert nav.current_dir == root
        assert nav.cursor == 0

    def test_select_file_does_not_change_directory(self, nav, music_dir):
        nav.move_up()
        selection = nav.activate_selection()

        assert isinstance(selection, SelectFile)
        assert nav.current_dir == music_dir
        assert nav.cursor == len(nav.entries)

    def test_unreadable_directory_leaves_state_unchanged(self, nav, music_dir, monkeypatch):
        def unreadable(path, *args):
            raise DirectoryReadError(path)

        nav.move_down()
        monkeypatch.setattr(state, "list_directory", unreadable)
        entries = list(nav.entries)

        with pytest.raises(DirectoryReadError):
            nav.activate_selection()

        assert nav.current_dir == music_dir
        assert nav.entries == entries
        assert nav.cursor == 1

    def test_removed_directory_is_reported(self, nav, music_dir):
        """A directory deleted after listing is not queued as a file."""
        nav.move_down()
        (music_dir / "Album" / "01.flac").unlink()
        (music_dir / "Album").rmdir()

        with pytest.raises(DirectoryReadError) as exc_info:
            nav.activate_selection()

        assert exc_info.value.path == music_dir / "Album"
        assert nav.current_dir == music_dir
        assert nav.cursor == 1

    def test_open_missing_directory_raises(self, tmp_path):
        with pytest.raises(DirectoryReadError):
            NavigationState.open(tmp_path / "missing")
