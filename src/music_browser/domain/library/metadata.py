"""
Audio metadata probing using mutagen.
"""

from pathlib import Path

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from .exceptions import DecodeError


def probe_duration(path: Path) -> float:
    """Read the total duration of an audio file in seconds.

    Raises:
        DecodeError: If the file cannot be opened, is not a recognized audio
            format, or reports a zero/unknown duration
    """
    try:
        audio_file = MutagenFile(str(path))
    except (MutagenError, OSError) as e:
        raise DecodeError(path, f"Cannot read {path}: {e}") from e

    if audio_file is None or not hasattr(audio_file, "info"):
        raise DecodeError(path, f"Unrecognized audio format: {path}")

    duration = getattr(audio_file.info, "length", None) or 0.0
    if duration <= 0:
        raise DecodeError(path, f"Zero-length or corrupt audio file: {path}")

    logger.debug(f"Probed duration {duration:.2f}s for {path}")
    return float(duration)
