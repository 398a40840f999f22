"""Header row: current directory, key help and the song now playing."""

from blessed import Terminal

from ..helpers import center
from ..state import SessionSnapshot
from .box import render_box, styler

CONTROL_HINT = "▶(s) >>|(n) ⏯(space) CLR(c) EXT(q)"
HEADER_HEIGHT = 3


def render_header(
    term: Terminal,
    snapshot: SessionSnapshot,
    widths: tuple[int, int, int],
    use_colors: bool = True,
) -> list[str]:
    """Render the three header boxes side by side."""
    bold = styler(term, "bold", use_colors)
    left_w, mid_w, right_w = widths

    directory = render_box(
        "Directory", [(snapshot.current_dir or "None", bold)], left_w, HEADER_HEIGHT
    )
    control = render_box(
        "Control",
        [(center(CONTROL_HINT, max(mid_w - 2, 0)), None)],
        mid_w,
        HEADER_HEIGHT,
        border=styler(term, "bright_blue", use_colors),
    )
    now_playing = render_box(
        "Now Playing", [(snapshot.playing_song or "None", bold)], right_w, HEADER_HEIGHT
    )

    return [a + b + c for a, b, c in zip(directory, control, now_playing)]
