"""
Explorer navigation state.

Cursor index 0 is the reserved "go up" row; indices 1..len(entries) map to
entries 0..len(entries)-1.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from loguru import logger

from music_browser.domain.library.exceptions import DirectoryReadError
from music_browser.domain.library.lister import DEFAULT_AUDIO_EXTENSIONS, list_directory
from music_browser.domain.library.models import Track
from music_browser.utils.selection import move_selection


@dataclass(frozen=True)
class GoUp:
    """Row 0: move to the parent directory."""


@dataclass(frozen=True)
class EnterDirectory:
    path: Path


@dataclass(frozen=True)
class SelectFile:
    track: Track


Selection = Union[GoUp, EnterDirectory, SelectFile]


class NavigationState:
    """Current directory, its listing and the explorer cursor."""

    def __init__(
        self,
        directory: Path,
        extensions: Iterable[str] = DEFAULT_AUDIO_EXTENSIONS,
        sort_entries: bool = False,
    ):
        self.current_dir = Path(directory)
        self.extensions = tuple(extensions)
        self.sort_entries = sort_entries
        self.entries: list[Track] = []
        self.cursor = 0

    @classmethod
    def open(
        cls,
        directory: Path,
        extensions: Iterable[str] = DEFAULT_AUDIO_EXTENSIONS,
        sort_entries: bool = False,
    ) -> "NavigationState":
        """Create the state and list ``directory``.

        Raises:
            DirectoryReadError: If the directory cannot be listed
        """
        state = cls(directory, extensions, sort_entries)
        state.change_directory(state.current_dir)
        return state

    def change_directory(self, path: Path) -> None:
        """List ``path`` and make it current, cursor back on "go up".

        Raises:
            DirectoryReadError: If listing fails; state is left unchanged
        """
        entries = list_directory(path, self.extensions, self.sort_entries)
        self.current_dir = Path(path)
        self.entries = entries
        self.cursor = 0
        logger.debug(f"Changed directory to {path} ({len(entries)} entries)")

    def move_up(self) -> None:
        self.cursor = move_selection(self.cursor, -1, len(self.entries) + 1)

    def move_down(self) -> None:
        self.cursor = move_selection(self.cursor, 1, len(self.entries) + 1)

    def selected(self) -> Selection:
        """Resolve the row under the cursor without changing anything.

        Raises:
            DirectoryReadError: If the entry was removed after listing
        """
        if self.cursor == 0 or self.cursor > len(self.entries):
            return GoUp()

        entry = self.entries[self.cursor - 1]
        if not entry.path.exists():
            raise DirectoryReadError(entry.path, f"{entry.path} no longer exists")
        if entry.path.is_dir():
            return EnterDirectory(entry.path)
        return SelectFile(entry)

    def activate_selection(self) -> Selection:
        """Act on the row under the cursor.

        GoUp and EnterDirectory change directory here (GoUp at the filesystem
        root does nothing); SelectFile is returned for the caller to queue.

        Raises:
            DirectoryReadError: If the target directory cannot be listed or the
                entry under the cursor was removed
        """
        selection = self.selected()

        match selection:
            case GoUp():
                parent = self.current_dir.parent
                if parent != self.current_dir:
                    self.change_directory(parent)
            case EnterDirectory(path=path):
                self.change_directory(path)

        return selection
