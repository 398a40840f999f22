"""
Music Browser CLI - Entry point

Validates the start directory, loads configuration, starts the audio
output and hands over to the blessed session.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from music_browser import __version__
from music_browser.context import AppContext
from music_browser.core.config import get_log_file_path, load_config
from music_browser.core.console import safe_print
from music_browser.core.output import setup_loguru
from music_browser.domain.library.exceptions import DirectoryReadError
from music_browser.domain.playback.exceptions import AudioOutputError
from music_browser.domain.playback.player import MpvOutput, check_mpv_available

INVALID_DIRECTORY_MESSAGE = "Invalid directory path!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-browser",
        description="Music Browser - browse a directory tree and play audio files",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=".",
        help="Directory to start browsing in (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.toml",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def resolve_start_directory(raw: str) -> Optional[Path]:
    """Return the absolute start directory, or None when it is not a directory."""
    path = Path(raw).expanduser()
    if not path.is_dir():
        return None
    return path.resolve()


def run(directory: Path, config_path: Optional[Path] = None) -> int:
    """Run a browsing session in ``directory``.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config = load_config(config_path)
    setup_loguru(get_log_file_path(config), config.logging.level)

    if not check_mpv_available():
        safe_print("mpv is not installed or not on PATH", style="bold red")
        return 1

    try:
        with MpvOutput.start(config) as output:
            ctx = AppContext.create(config, directory, output)

            from music_browser.ui.blessed.app import run_interactive_ui

            run_interactive_ui(ctx)
    except AudioOutputError as e:
        logger.error(f"Audio output unavailable: {e}")
        safe_print(f"Cannot start audio output: {e}", style="bold red")
        return 1
    except DirectoryReadError as e:
        logger.error(f"Cannot list start directory: {e}")
        safe_print(INVALID_DIRECTORY_MESSAGE, style="bold red")
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the music-browser command."""
    args = build_parser().parse_args(argv)

    directory = resolve_start_directory(args.dir)
    if directory is None:
        safe_print(INVALID_DIRECTORY_MESSAGE, style="bold red")
        sys.exit(1)

    sys.exit(run(directory, args.config))


if __name__ == "__main__":
    main()
