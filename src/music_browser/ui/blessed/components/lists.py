"""Explorer and playlist panels."""

from typing import Sequence

from blessed import Terminal

from ..helpers import compute_scroll_window
from ..state import SessionSnapshot
from .box import render_box, styler

HIGHLIGHT_SYMBOL = "> "


def render_list_panel(
    term: Terminal,
    title: str,
    items: Sequence[str],
    selected: int,
    width: int,
    height: int,
    use_colors: bool = True,
) -> list[str]:
    """
    Render a titled list with the selected row highlighted and kept in view.

    Args:
        term: blessed Terminal instance
        title: Panel title
        items: Row labels
        selected: Highlighted index (ignored for an empty list)
        width: Panel width including borders
        height: Panel height including borders
        use_colors: Highlight with background color instead of plain marker only

    Returns:
        List of rendered lines
    """
    highlight = styler(term, "black_on_cyan", use_colors)
    visible_rows = max(height - 2, 0)
    start, end = compute_scroll_window(selected, len(items), visible_rows)

    rows = []
    for index in range(start, end):
        if index == selected:
            rows.append((HIGHLIGHT_SYMBOL + items[index], highlight))
        else:
            rows.append((" " * len(HIGHLIGHT_SYMBOL) + items[index], None))

    return render_box(title, rows, width, height)


def render_explorer(
    term: Terminal, snapshot: SessionSnapshot, width: int, height: int, use_colors: bool = True
) -> list[str]:
    return render_list_panel(
        term,
        "Explorer",
        snapshot.explorer_items,
        snapshot.explorer_index,
        width,
        height,
        use_colors,
    )


def render_playlist(
    term: Terminal, snapshot: SessionSnapshot, width: int, height: int, use_colors: bool = True
) -> list[str]:
    selected = snapshot.playlist_index if snapshot.playlist_items else -1
    return render_list_panel(
        term,
        "Playlist",
        snapshot.playlist_items,
        selected,
        width,
        height,
        use_colors,
    )
