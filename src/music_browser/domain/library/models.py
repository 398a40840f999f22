"""
Music library domain models.

Contains the track reference shared by the explorer and the playlist.
"""

from pathlib import Path
from typing import NamedTuple


class Track(NamedTuple):
    """A playable item: display name plus filesystem path.

    The same type is used for explorer entries (which may be directories)
    and playlist items.
    """

    display_name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "Track":
        """Build a track reference named after the file."""
        return cls(display_name=path.name, path=path)
