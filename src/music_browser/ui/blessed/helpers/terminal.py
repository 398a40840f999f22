"""Terminal output utilities that prevent rendering artifacts."""

import sys

from blessed import Terminal
from wcwidth import wcwidth


def write_at(
    term: Terminal, x: int, y: int, content: str, *, clear: bool = True
) -> None:
    """Write content at position, clearing the rest of the line by default.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Whether to clear to end of line (default True)
    """
    if clear:
        sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        sys.stdout.write(term.move_xy(x, y) + content)


def display_width(text: str) -> int:
    """Columns ``text`` occupies on screen; wide (CJK/emoji) characters count two."""
    return sum(max(wcwidth(char), 0) for char in text)


def fit(text: str, width: int) -> str:
    """Truncate or pad plain text to exactly ``width`` display columns."""
    if width <= 0:
        return ""

    used = display_width(text)
    if used <= width:
        return text + " " * (width - used)

    # Leave a column for the ellipsis unless there is only one
    limit = width - 1 if width > 1 else width
    kept = []
    used = 0
    for char in text:
        char_width = max(wcwidth(char), 0)
        if used + char_width > limit:
            break
        kept.append(char)
        used += char_width

    result = "".join(kept) + ("…" if width > 1 else "")
    return result + " " * (width - display_width(result))


def center(text: str, width: int, fillchar: str = " ") -> str:
    """Center plain text in ``width`` display columns, truncating if needed."""
    used = display_width(text)
    if used >= width:
        return fit(text, width)
    left = (width - used) // 2
    return fillchar * left + text + fillchar * (width - used - left)
