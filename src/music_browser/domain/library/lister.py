"""
Directory listing for the explorer.

Lists the immediate children of a directory, keeping sub-directories and
files whose extension is in the recognized audio set.
"""

import os
from pathlib import Path
from typing import Iterable

from loguru import logger

from .exceptions import DirectoryReadError
from .models import Track

DEFAULT_AUDIO_EXTENSIONS = ("mp3", "wav", "flac", "ts")


def is_supported_format(name: str, extensions: Iterable[str]) -> bool:
    """Check the file extension against the recognized set.

    Matching is exact and case-sensitive ("MP3" is not "mp3"). Dotfiles such
    as ".mp3" have no extension.
    """
    suffix = Path(name).suffix
    return bool(suffix) and suffix[1:] in extensions


def _is_displayable(name: str) -> bool:
    """Names that are not valid UTF-8 are skipped rather than mangled."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_directory(
    path: Path,
    extensions: Iterable[str] = DEFAULT_AUDIO_EXTENSIONS,
    sort_entries: bool = False,
) -> list[Track]:
    """List sub-directories and audio files directly inside a directory.

    Args:
        path: Directory to list (not traversed recursively)
        extensions: Recognized audio extensions, without leading dot
        sort_entries: Sort by name (case-insensitive) instead of keeping
            filesystem enumeration order

    Returns:
        List of (name, path) track references

    Raises:
        DirectoryReadError: If the directory itself cannot be read
    """
    extensions = frozenset(extensions)
    entries: list[Track] = []

    try:
        with os.scandir(path) as it:
            for entry in it:
                if not _is_displayable(entry.name):
                    continue
                try:
                    if entry.is_dir():
                        entries.append(Track(entry.name, Path(entry.path)))
                    elif entry.is_file() and is_supported_format(entry.name, extensions):
                        entries.append(Track(entry.name, Path(entry.path)))
                except OSError as e:
                    # Per-entry stat failures are skipped
                    logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
    except OSError as e:
        raise DirectoryReadError(Path(path), f"Cannot read directory {path}: {e}") from e

    if sort_entries:
        entries.sort(key=lambda track: track.display_name.casefold())

    return entries
