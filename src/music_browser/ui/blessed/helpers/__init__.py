"""Blessed UI helper functions."""

from .selection import compute_scroll_window
from .terminal import center, display_width, fit, write_at

__all__ = ["write_at", "fit", "center", "display_width", "compute_scroll_window"]
