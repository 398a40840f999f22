"""Wave animation, progress gauge and volume gauge."""

import random
from typing import Optional

from blessed import Terminal

from ..state import SessionSnapshot
from .box import render_box, styler

NO_SOUND_LABEL = "No More Sound"
WAVE_BARS = 20
WAVE_MAX = 10
BAR_WIDTH = 4
BAR_GAP = 1
PROGRESS_HEIGHT = 3


def wave_levels(is_playing: bool, rng: Optional[random.Random] = None) -> list[int]:
    """Random bar heights in [0, WAVE_MAX) while playing, flat otherwise."""
    if not is_playing:
        return [0] * WAVE_BARS
    rng = rng or random
    return [rng.randrange(WAVE_MAX) for _ in range(WAVE_BARS)]


def render_wave(
    term: Terminal,
    snapshot: SessionSnapshot,
    width: int,
    height: int,
    use_colors: bool = True,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Render the bar chart as vertical columns of blocks."""
    inner_w = max(width - 2, 0)
    inner_h = max(height - 2, 0)
    bar_style = styler(term, "cyan", use_colors)

    levels = wave_levels(snapshot.is_playing, rng)
    bars = levels[: inner_w // (BAR_WIDTH + BAR_GAP)]
    bar_rows = [round(level * inner_h / WAVE_MAX) for level in bars]

    rows = []
    for row in range(inner_h):
        depth = inner_h - row  # 1 at the bottom row
        cells = [("█" if filled >= depth else " ") * BAR_WIDTH for filled in bar_rows]
        rows.append(((" " * BAR_GAP).join(cells).center(inner_w), bar_style))

    return render_box("Wave", rows, width, height)


def gauge(label: str, ratio: float, width: int) -> tuple[str, str, str]:
    """
    Split a gauge of exactly ``width`` columns into its plain parts.

    Returns:
        Tuple of (label part, filled line, empty line)
    """
    ratio = max(0.0, min(1.0, ratio))
    head = (label + " ")[:width]
    line_width = width - len(head)
    filled = int(round(line_width * ratio))
    return head, "━" * filled, "─" * (line_width - filled)


def _gauge_row(term: Terminal, label: str, ratio: float, width: int, use_colors: bool):
    head, filled, empty = gauge(label, ratio, width)
    if not use_colors:
        return (head + filled + empty, None)

    def style(_text: str) -> str:
        return term.italic(head) + term.bold_cyan(filled) + term.bright_black(empty)

    return (head + filled + empty, style)


def render_progress(
    term: Terminal,
    snapshot: SessionSnapshot,
    width: int,
    use_colors: bool = True,
) -> list[str]:
    """Render progress (70%) and volume (30%) gauges side by side."""
    progress_w = int(width * 0.7)
    volume_w = width - progress_w

    if snapshot.is_active and snapshot.progress_text:
        label, ratio = snapshot.progress_text, snapshot.progress_ratio
    else:
        label, ratio = NO_SOUND_LABEL, 0.0

    progress_box = render_box(
        "",
        [_gauge_row(term, label, ratio, max(progress_w - 2, 0), use_colors)],
        progress_w,
        PROGRESS_HEIGHT,
    )
    volume_box = render_box(
        "",
        [_gauge_row(term, "VOL", snapshot.volume, max(volume_w - 2, 0), use_colors)],
        volume_w,
        PROGRESS_HEIGHT,
    )

    return [a + b for a, b in zip(progress_box, volume_box)]
