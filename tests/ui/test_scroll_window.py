"""Tests for list scroll window computation."""

from music_browser.ui.blessed.helpers.selection import compute_scroll_window


class TestScrollWindow:
    """Test scroll window computation logic."""

    def test_no_scroll_when_fits(self):
        """When all options fit, return full range."""
        assert compute_scroll_window(0, 5, 10) == (0, 5)

    def test_scroll_to_selection_at_start(self):
        assert compute_scroll_window(0, 20, 5) == (0, 5)

    def test_scroll_to_selection_at_end(self):
        """Selected item at end should show last items."""
        assert compute_scroll_window(19, 20, 5) == (15, 20)

    def test_scroll_to_selection_in_middle(self):
        """Selected item in middle should be centered."""
        assert compute_scroll_window(10, 20, 5) == (8, 13)

    def test_no_rows_available(self):
        assert compute_scroll_window(3, 10, 0) == (0, 0)

    def test_empty_list(self):
        assert compute_scroll_window(-1, 0, 5) == (0, 0)
