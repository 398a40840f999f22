"""Library exceptions for filesystem and metadata failures."""

from pathlib import Path


class LibraryError(Exception):
    """Base exception for library operations."""

    pass


class DirectoryReadError(LibraryError):
    """Raised when a directory cannot be listed (missing, not a directory, permission)."""

    def __init__(self, path: Path, message: str = None):
        self.path = path
        super().__init__(message or f"Cannot read directory: {path}")


class DecodeError(LibraryError):
    """Raised when an audio file's duration cannot be determined."""

    def __init__(self, path: Path, message: str = None):
        self.path = path
        super().__init__(message or f"Cannot decode audio file: {path}")
