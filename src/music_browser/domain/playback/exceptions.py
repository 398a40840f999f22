"""Playback exceptions."""

from music_browser.domain.library.models import Track


class PlaybackError(Exception):
    """Base exception for playback operations."""

    pass


class UnplayableTrackError(PlaybackError):
    """Raised when a track cannot be opened or its duration cannot be determined."""

    def __init__(self, track: Track, message: str = None):
        self.track = track
        super().__init__(message or f"Cannot play track: {track.display_name}")


class AudioOutputError(PlaybackError):
    """Raised when the audio output rejects a command or is not running."""

    pass
