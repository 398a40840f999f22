"""Immutable render snapshot built from the session once per tick."""

from dataclasses import dataclass
from typing import Optional

from music_browser.context import AppContext

GO_BACK_LABEL = "Go Back"


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the renderer needs, detached from the mutable session."""

    current_dir: str
    explorer_items: tuple[str, ...]  # Row 0 is GO_BACK_LABEL
    explorer_index: int
    playlist_items: tuple[str, ...]
    playlist_index: int
    playing_song: Optional[str]
    is_active: bool
    is_playing: bool
    progress_text: Optional[str]
    progress_ratio: float
    volume: float
    feedback: Optional[str] = None


def create_snapshot(ctx: AppContext) -> SessionSnapshot:
    """Pure function: capture the current session state for rendering."""
    navigation = ctx.navigation
    playback = ctx.playback
    active = playback.is_active()

    return SessionSnapshot(
        current_dir=str(navigation.current_dir),
        explorer_items=(GO_BACK_LABEL,) + tuple(e.display_name for e in navigation.entries),
        explorer_index=navigation.cursor,
        playlist_items=tuple(t.display_name for t in playback.playlist),
        playlist_index=playback.playlist_index,
        playing_song=playback.playing_song.display_name if playback.playing_song else None,
        is_active=active,
        is_playing=playback.is_playing,
        progress_text=playback.progress_text() if active else None,
        progress_ratio=playback.progress_ratio() if active else 0.0,
        volume=playback.volume,
        feedback=ctx.feedback,
    )
