"""Main event loop and entry point for blessed UI."""

from typing import Callable, Optional

from blessed import Terminal
from loguru import logger

from music_browser.context import AppContext

from .components import render_frame
from .events.commands import execute_command
from .events.keyboard import Command, handle_key
from .state import SessionSnapshot, create_snapshot

Renderer = Callable[[Terminal, SessionSnapshot], None]


def run_interactive_ui(ctx: AppContext) -> AppContext:
    """
    Run the main interactive UI event loop.

    Args:
        ctx: Application context with config, navigation and playback session

    Returns:
        Updated AppContext after UI session ends
    """
    term = Terminal()

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            ctx = main_loop(term, ctx)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - leaving session")

    return ctx


def _default_renderer(ctx: AppContext) -> Renderer:
    ui = ctx.config.ui

    def render(term: Terminal, snapshot: SessionSnapshot) -> None:
        render_frame(term, snapshot, use_colors=ui.use_colors, show_wave=ui.show_wave)

    return render


def main_loop(
    term: Terminal, ctx: AppContext, render: Optional[Renderer] = None
) -> AppContext:
    """
    Main event loop - functional style.

    Each iteration waits for at most one refresh interval for a key, applies
    the resulting command, advances the playback clock and paints a frame.

    Args:
        term: blessed Terminal instance
        ctx: Application context
        render: Frame painter; defaults to the full blessed screen

    Returns:
        Updated AppContext after loop exits
    """
    render = render or _default_renderer(ctx)
    timeout = ctx.config.ui.refresh_ms / 1000
    last_size = None

    logger.info(f"Session started in {ctx.navigation.current_dir}")

    while True:
        key = term.inkey(timeout=timeout)

        if key:
            command = handle_key(key)
            if command is not Command.UNSUPPORTED:
                logger.debug(f"Key {key!r} -> {command.name}")
            ctx, should_quit = execute_command(ctx, command)
            if should_quit:
                break

        ctx.playback.tick()

        size = (term.width, term.height)
        if size != last_size:
            print(term.clear, end="")
            last_size = size

        render(term, create_snapshot(ctx))

    logger.info("Session ended")
    return ctx
