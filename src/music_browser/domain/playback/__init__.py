"""Playback domain - status state machine, session and mpv output.

This domain handles:
- The Waiting/Playing/Paused/Complete status machine
- Elapsed-time accounting across pause/resume
- Playlist cursor and auto-advance
- MPV integration via JSON IPC
"""

from .exceptions import AudioOutputError, PlaybackError, UnplayableTrackError
from .player import (
    AudioOutput,
    MpvHandle,
    MpvOutput,
    check_mpv_available,
    is_mpv_running,
    send_mpv_command,
    start_mpv,
    stop_mpv,
)
from .session import PlaybackSession, clamp_volume, format_time
from .status import Complete, Paused, Playing, PlayStatus, Waiting

__all__ = [
    # Status
    "PlayStatus",
    "Waiting",
    "Playing",
    "Paused",
    "Complete",
    # Session
    "PlaybackSession",
    "format_time",
    "clamp_volume",
    # Output
    "AudioOutput",
    "MpvHandle",
    "MpvOutput",
    "check_mpv_available",
    "start_mpv",
    "stop_mpv",
    "is_mpv_running",
    "send_mpv_command",
    # Errors
    "PlaybackError",
    "UnplayableTrackError",
    "AudioOutputError",
]
