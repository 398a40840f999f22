"""Application context for explicit state passing.

The context bundles the configuration with the two stateful owners of the
session (navigation and playback) and the last user-facing feedback line.
Command handlers return an updated context instead of touching globals.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from music_browser.core.config import Config
from music_browser.domain.navigation.state import NavigationState
from music_browser.domain.playback.player import AudioOutput
from music_browser.domain.playback.session import PlaybackSession


@dataclass
class AppContext:
    """Application context passed through the session loop.

    Attributes:
        config: Application configuration
        navigation: Explorer state (current directory, entries, cursor)
        playback: Playback session (playlist, status, volume)
        feedback: Last recoverable error shown to the user, if any
    """

    config: Config
    navigation: NavigationState
    playback: PlaybackSession
    feedback: Optional[str] = None

    @classmethod
    def create(cls, config: Config, directory: Path, output: AudioOutput) -> "AppContext":
        """Create the initial context and list the start directory.

        Raises:
            DirectoryReadError: If the start directory cannot be listed
        """
        navigation = NavigationState.open(
            directory,
            extensions=config.music.supported_formats,
            sort_entries=config.music.sort_entries,
        )
        playback = PlaybackSession(
            output,
            volume=config.player.volume,
            volume_step=config.player.volume_step,
        )
        return cls(config=config, navigation=navigation, playback=playback)

    def with_feedback(self, message: Optional[str]) -> "AppContext":
        """Return new context with updated feedback line."""
        return replace(self, feedback=message)
