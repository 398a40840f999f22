"""
Playback session: playlist, status state machine, volume and time accounting.

The session is the single owner of the audio output. Time is measured with
an injectable clock so the state machine can be driven without real waits.
"""

import time
from typing import Callable, Optional

from loguru import logger

from music_browser.domain.library.exceptions import DecodeError
from music_browser.domain.library.models import Track
from music_browser.utils.selection import move_selection

from . import status as play_status
from .exceptions import AudioOutputError, UnplayableTrackError
from .player import AudioOutput
from .status import Complete, Paused, Playing, PlayStatus, Waiting

DEFAULT_VOLUME_STEP = 0.01
# Volume is kept in hundredths; smaller steps would round away
MIN_VOLUME_STEP = 0.01


def format_time(seconds: float) -> str:
    """Format time in seconds to MM:SS format.

    Minutes are not rolled over into hours, so long tracks grow the field.
    """
    if seconds < 0:
        return "00:00"

    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def clamp_volume(volume: float) -> float:
    """Clamp to [0.0, 1.0], rounded to hundredths so repeated steps do not drift."""
    return max(0.0, min(1.0, round(volume, 2)))


def normalize_volume_step(step: float) -> float:
    """Round a step to hundredths, never below one hundredth."""
    return max(MIN_VOLUME_STEP, round(step, 2))


class PlaybackSession:
    """Owns the playlist, the playback status and the output volume."""

    def __init__(
        self,
        output: AudioOutput,
        volume: float = 1.0,
        volume_step: float = DEFAULT_VOLUME_STEP,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._output = output
        self._clock = clock
        self.volume = clamp_volume(volume)
        self.volume_step = normalize_volume_step(volume_step)
        self.current_time = 0.0
        self.total_time = 0.0
        self.status: PlayStatus = Waiting()
        self.playing_song: Optional[Track] = None
        self.playlist: list[Track] = []
        self.playlist_index = 0
        self.is_playing = False

    # Track lifecycle

    def start_track(self, track: Track) -> None:
        """Open a track on the output and start playing it from zero.

        Raises:
            UnplayableTrackError: If the file cannot be opened or has no
                usable duration. Session state is left untouched.
        """
        try:
            duration = self._output.open(track.path)
        except (DecodeError, AudioOutputError) as e:
            logger.warning(f"Unplayable track {track.path}: {e}")
            raise UnplayableTrackError(track, str(e)) from e

        # Status is reset at the same point the output swapped streams
        self._output.set_volume(self.volume)
        self.total_time = duration
        self.current_time = 0.0
        self.status = Waiting()
        self.is_playing = False
        self.playing_song = track
        self.resume()
        logger.info(f"Playing {track.display_name} ({format_time(duration)})")

    def resume(self) -> None:
        """Start or continue playback; no-op while already playing."""
        if isinstance(self.status, Playing):
            return
        self._output.play()
        self.is_playing = True
        self.status = play_status.resumed(self.status, self._clock())

    def pause(self) -> None:
        """Pause playback; only moves out of Playing."""
        if not isinstance(self.status, Playing):
            return
        self._output.pause()
        self.is_playing = False
        self.status = play_status.paused(self.status, self._clock())

    def toggle_pause(self) -> None:
        """Pause when playing, resume when paused; ignored without an active track."""
        if not self.is_active():
            return
        if self.is_playing:
            self.pause()
        else:
            self.resume()

    def tick(self) -> None:
        """Advance the clock; completes the track and auto-advances at the end."""
        if not isinstance(self.status, Playing):
            return

        elapsed = play_status.elapsed(self.status, self._clock())
        if elapsed >= self.total_time:
            logger.debug(f"Track complete after {elapsed:.2f}s")
            self.status = Complete()
            self.is_playing = False
            self.advance_playlist()
        else:
            self.current_time = elapsed

    def advance_playlist(self) -> bool:
        """Move to the next playlist entry (wrapping) and play it.

        Unplayable entries are skipped; each entry is tried at most once.
        If nothing can be played the cursor rests on the last attempt and the
        status is left as it was.

        Returns:
            True if a track started
        """
        if not self.playlist:
            return False

        for _ in range(len(self.playlist)):
            self.playlist_index = move_selection(
                self.playlist_index, 1, len(self.playlist)
            )
            track = self.playlist[self.playlist_index]
            try:
                self.start_track(track)
                return True
            except UnplayableTrackError:
                logger.info(f"Skipping unplayable track: {track.display_name}")

        logger.warning("No playable track left in playlist")
        return False

    def play_selected(self) -> bool:
        """Start the track under the playlist cursor.

        Raises:
            UnplayableTrackError: If that track cannot be played
        """
        if not self.playlist:
            return False
        self.start_track(self.playlist[self.playlist_index])
        return True

    # Volume

    def set_volume_delta(self, delta: float) -> None:
        """Change volume by ``delta``, clamped to [0.0, 1.0]."""
        self.volume = clamp_volume(self.volume + delta)
        self._output.set_volume(self.volume)

    def volume_up(self) -> None:
        self.set_volume_delta(self.volume_step)

    def volume_down(self) -> None:
        self.set_volume_delta(-self.volume_step)

    # Playlist

    def append(self, track: Track) -> None:
        self.playlist.append(track)

    def clear(self) -> None:
        """Empty the playlist; audio already streaming keeps playing."""
        self.playlist.clear()
        self.playlist_index = 0
        self.playing_song = None

    def playlist_up(self) -> None:
        self.playlist_index = move_selection(self.playlist_index, -1, len(self.playlist))

    def playlist_down(self) -> None:
        self.playlist_index = move_selection(self.playlist_index, 1, len(self.playlist))

    # Queries

    def is_active(self) -> bool:
        """True unless Waiting or Complete; decides whether progress renders."""
        return play_status.is_active(self.status)

    def progress_ratio(self) -> float:
        if self.total_time <= 0:
            return 0.0
        return max(0.0, min(1.0, self.current_time / self.total_time))

    def progress_text(self) -> str:
        """Render ``MM:SS / MM:SS`` for current and total time."""
        return f"{format_time(self.current_time)} / {format_time(self.total_time)}"

    def close(self) -> None:
        """Release the audio output."""
        self._output.close()
