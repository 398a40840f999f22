"""Rendering functions for blessed UI."""

from .header import render_header
from .layout import calculate_layout, compose_frame, render_frame
from .lists import render_explorer, render_playlist
from .progress import render_progress, render_wave

__all__ = [
    "render_header",
    "render_explorer",
    "render_playlist",
    "render_wave",
    "render_progress",
    "calculate_layout",
    "compose_frame",
    "render_frame",
]
