"""Library domain - track references, directory listing and metadata probing."""

from .exceptions import DecodeError, DirectoryReadError, LibraryError
from .lister import DEFAULT_AUDIO_EXTENSIONS, is_supported_format, list_directory
from .metadata import probe_duration
from .models import Track

__all__ = [
    "Track",
    "DEFAULT_AUDIO_EXTENSIONS",
    "is_supported_format",
    "list_directory",
    "probe_duration",
    "LibraryError",
    "DirectoryReadError",
    "DecodeError",
]
