"""Layout calculation and full-frame rendering."""

import sys

from blessed import Terminal

from ..helpers import fit, write_at
from ..state import SessionSnapshot
from .box import styler
from .header import HEADER_HEIGHT, render_header
from .lists import render_explorer, render_playlist
from .progress import PROGRESS_HEIGHT, render_progress, render_wave

SIDE_PERCENT = 20
STATUS_HEIGHT = 1


def calculate_layout(width: int, height: int) -> dict[str, int]:
    """
    Pure function: calculate column widths and row positions.

    Columns split 20/60/20; the centre body column stacks the wave above the
    progress strip; the last row holds the status line.

    Args:
        width: Terminal width in columns
        height: Terminal height in rows

    Returns:
        Dictionary with region positions and sizes
    """
    side_w = width * SIDE_PERCENT // 100
    mid_w = max(width - 2 * side_w, 0)
    body_height = max(height - HEADER_HEIGHT - STATUS_HEIGHT, 0)
    progress_height = min(PROGRESS_HEIGHT, body_height)

    return {
        "left_width": side_w,
        "mid_width": mid_w,
        "right_width": side_w,
        "header_y": 0,
        "header_height": min(HEADER_HEIGHT, height),
        "body_y": HEADER_HEIGHT,
        "body_height": body_height,
        "wave_height": body_height - progress_height,
        "progress_height": progress_height,
        "status_y": max(height - STATUS_HEIGHT, 0),
    }


def compose_frame(
    term: Terminal,
    snapshot: SessionSnapshot,
    width: int,
    height: int,
    use_colors: bool = True,
    show_wave: bool = True,
) -> list[str]:
    """Build every screen line for one frame (top to bottom)."""
    layout = calculate_layout(width, height)
    widths = (layout["left_width"], layout["mid_width"], layout["right_width"])

    lines = render_header(term, snapshot, widths, use_colors)[: layout["header_height"]]

    body_h = layout["body_height"]
    if body_h > 0:
        explorer = render_explorer(term, snapshot, layout["left_width"], body_h, use_colors)
        playlist = render_playlist(term, snapshot, layout["right_width"], body_h, use_colors)

        if show_wave:
            centre = render_wave(
                term, snapshot, layout["mid_width"], layout["wave_height"], use_colors
            )
        else:
            centre = [" " * layout["mid_width"]] * layout["wave_height"]
        centre += render_progress(term, snapshot, layout["mid_width"], use_colors)[
            : layout["progress_height"]
        ]

        lines += [a + b + c for a, b, c in zip(explorer, centre, playlist)]

    if height > len(lines):
        status = fit(snapshot.feedback or "", width)
        lines.append(styler(term, "yellow", use_colors)(status) if snapshot.feedback else status)

    return lines[:height]


def render_frame(
    term: Terminal,
    snapshot: SessionSnapshot,
    use_colors: bool = True,
    show_wave: bool = True,
) -> None:
    """Paint the whole frame; stateless, called once per tick."""
    lines = compose_frame(term, snapshot, term.width, term.height, use_colors, show_wave)
    for y, line in enumerate(lines):
        write_at(term, 0, y, line)
    sys.stdout.flush()
