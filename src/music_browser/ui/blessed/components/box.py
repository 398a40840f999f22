"""Bordered panel rendering shared by every component."""

from typing import Callable, Optional, Sequence

from blessed import Terminal

from ..helpers import center, fit

Style = Callable[[str], str]


def _plain(text: str) -> str:
    return text


def styler(term: Terminal, name: str, enabled: bool = True) -> Style:
    """Return a blessed formatter such as ``term.bold_cyan``, or identity when colors are off."""
    if not enabled:
        return _plain
    return getattr(term, name)


def render_box(
    title: str,
    rows: Sequence[tuple[str, Optional[Style]]],
    width: int,
    height: int,
    border: Style = _plain,
) -> list[str]:
    """
    Render a rounded box as ``height`` lines of exactly ``width`` columns.

    Args:
        title: Title centered in the top border (may be empty)
        rows: (plain text, style) pairs for the inside, top to bottom;
              text is fitted to the inner width before styling
        width: Total width including borders
        height: Total height including borders
        border: Style applied to border characters

    Returns:
        List of rendered lines
    """
    if width < 2 or height < 2:
        return [" " * max(width, 0)] * max(height, 0)

    inner = width - 2
    label = f" {title} " if title else ""
    lines = [border("╭" + center(label, inner, "─") + "╮")]

    for i in range(height - 2):
        if i < len(rows):
            text, style = rows[i]
            body = fit(text, inner)
            if style is not None:
                body = style(body)
        else:
            body = " " * inner
        lines.append(border("│") + body + border("│"))

    lines.append(border("╰" + "─" * inner + "╯"))
    return lines
