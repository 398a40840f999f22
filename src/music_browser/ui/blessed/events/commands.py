"""Command dispatch for the session loop.

Each handler mutates navigation or playback through their own operations
and returns the (possibly updated) context. Recoverable failures are
logged and turned into a feedback line; nothing here ends the session
except Command.QUIT.
"""

from typing import Callable

from loguru import logger

from music_browser.context import AppContext
from music_browser.domain.library.exceptions import DirectoryReadError
from music_browser.domain.navigation.state import SelectFile
from music_browser.domain.playback.exceptions import UnplayableTrackError

from .keyboard import Command


def _explorer_up(ctx: AppContext) -> AppContext:
    ctx.navigation.move_up()
    return ctx


def _explorer_down(ctx: AppContext) -> AppContext:
    ctx.navigation.move_down()
    return ctx


def _volume_down(ctx: AppContext) -> AppContext:
    ctx.playback.volume_down()
    return ctx


def _volume_up(ctx: AppContext) -> AppContext:
    ctx.playback.volume_up()
    return ctx


def _toggle_play_pause(ctx: AppContext) -> AppContext:
    ctx.playback.toggle_pause()
    return ctx


def _stage_selected_for_play(ctx: AppContext) -> AppContext:
    try:
        ctx.playback.play_selected()
    except UnplayableTrackError as e:
        return ctx.with_feedback(f"Cannot play {e.track.display_name}")
    return ctx.with_feedback(None)


def _clear_playlist(ctx: AppContext) -> AppContext:
    ctx.playback.clear()
    logger.info("Playlist cleared")
    return ctx


def _next_track(ctx: AppContext) -> AppContext:
    if ctx.playback.playlist and not ctx.playback.advance_playlist():
        return ctx.with_feedback("No playable track in playlist")
    return ctx


def _activate_selection(ctx: AppContext) -> AppContext:
    try:
        selection = ctx.navigation.activate_selection()
    except DirectoryReadError as e:
        logger.warning(f"Directory change failed: {e}")
        return ctx.with_feedback(f"Cannot open {e.path}")

    if isinstance(selection, SelectFile):
        ctx.playback.append(selection.track)
        logger.debug(f"Queued {selection.track.path}")
    return ctx.with_feedback(None)


def _playlist_up(ctx: AppContext) -> AppContext:
    ctx.playback.playlist_up()
    return ctx


def _playlist_down(ctx: AppContext) -> AppContext:
    ctx.playback.playlist_down()
    return ctx


COMMAND_HANDLERS: dict[Command, Callable[[AppContext], AppContext]] = {
    Command.EXPLORER_UP: _explorer_up,
    Command.EXPLORER_DOWN: _explorer_down,
    Command.VOLUME_DOWN: _volume_down,
    Command.VOLUME_UP: _volume_up,
    Command.TOGGLE_PLAY_PAUSE: _toggle_play_pause,
    Command.STAGE_SELECTED_FOR_PLAY: _stage_selected_for_play,
    Command.CLEAR_PLAYLIST: _clear_playlist,
    Command.NEXT_TRACK: _next_track,
    Command.ACTIVATE_SELECTION: _activate_selection,
    Command.PLAYLIST_UP: _playlist_up,
    Command.PLAYLIST_DOWN: _playlist_down,
}


def execute_command(ctx: AppContext, command: Command) -> tuple[AppContext, bool]:
    """
    Apply a command to the session.

    Args:
        ctx: Application context
        command: Command produced by the key mapper

    Returns:
        Tuple of (updated context, should_quit)
    """
    if command is Command.QUIT:
        return ctx, True

    handler = COMMAND_HANDLERS.get(command)
    if handler is None:
        # Command.UNSUPPORTED and anything unmapped
        return ctx, False

    return handler(ctx), False
