"""
Configuration management for Music Browser
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MusicConfig:
    """Configuration for the file explorer."""

    supported_formats: List[str] = field(
        default_factory=lambda: ["mp3", "wav", "flac", "ts"]
    )
    sort_entries: bool = False


@dataclass
class PlayerConfig:
    """Configuration for music player settings."""

    mpv_socket_path: Optional[str] = None
    volume: float = 1.0  # Initial volume (0.0 - 1.0)
    volume_step: float = 0.01


@dataclass
class UIConfig:
    """Configuration for user interface."""

    refresh_ms: int = 100  # Input poll timeout per loop iteration
    use_colors: bool = True
    show_wave: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/music-browser/music-browser.log)
    )


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "music-browser"
    return Path.home() / ".config" / "music-browser"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "music-browser"
    return Path.home() / ".local" / "share" / "music-browser"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring a configured override."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "music-browser.log"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/music-browser (or ~/.config/music-browser)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Music Browser Configuration

[music]
# Extensions shown in the explorer (exact, case-sensitive, no dot)
supported_formats = ["mp3", "wav", "flac", "ts"]

# Sort explorer entries by name (false keeps filesystem order)
sort_entries = false

[player]
# Path for mpv socket (auto-generated if not specified)
# mpv_socket_path = "/tmp/music-browser-mpv"

# Initial volume (0.0 - 1.0)
volume = 1.0

# Volume change per Left/Right key press
volume_step = 0.01

[ui]
# Input poll timeout in milliseconds (one tick of the main loop)
refresh_ms = 100

# Use colors in terminal output
use_colors = true

# Show the wave animation
show_wave = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/music-browser/music-browser.log)
# log_file = "/path/to/music-browser.log"
""".strip()


def _normalize_formats(formats: List[str]) -> List[str]:
    """Strip leading dots so ".mp3" and "mp3" mean the same extension."""
    return [fmt[1:] if fmt.startswith(".") else fmt for fmt in formats]


def validate_config(config: Config) -> List[str]:
    """Replace invalid values with defaults.

    Returns:
        List of human-readable warnings, one per corrected value
    """
    warnings = []
    defaults = Config()

    level = config.logging.level.upper()
    if level not in VALID_LOG_LEVELS:
        warnings.append(f"Invalid log level: {config.logging.level} (using default)")
        level = defaults.logging.level
    config.logging.level = level

    if not isinstance(config.ui.refresh_ms, int) or config.ui.refresh_ms <= 0:
        warnings.append(f"refresh_ms must be a positive integer, got {config.ui.refresh_ms} (using default)")
        config.ui.refresh_ms = defaults.ui.refresh_ms

    step = config.player.volume_step
    if not isinstance(step, (int, float)) or not 0 < step <= 1:
        warnings.append(f"volume_step must be in (0, 1], got {step} (using default)")
        config.player.volume_step = defaults.player.volume_step
    elif round(step, 2) != step:
        # Volume moves in hundredths; other steps would round unevenly or to nothing
        rounded = max(0.01, round(step, 2))
        warnings.append(f"volume_step must be a multiple of 0.01, got {step} (using {rounded})")
        config.player.volume_step = rounded

    if not isinstance(config.player.volume, (int, float)):
        warnings.append(f"volume must be a number, got {config.player.volume} (using default)")
        config.player.volume = defaults.player.volume
    config.player.volume = max(0.0, min(1.0, float(config.player.volume)))

    return warnings


def _apply_env_overrides(config: Config) -> None:
    """Environment variables override TOML values."""
    socket_path = os.environ.get("MUSIC_BROWSER_MPV_SOCKET")
    if socket_path:
        config.player.mpv_socket_path = socket_path

    log_level = os.environ.get("MUSIC_BROWSER_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML, falling back to defaults per key."""
    config = Config()

    if "music" in toml_data:
        music_data = toml_data["music"]
        config.music = MusicConfig(
            supported_formats=_normalize_formats(
                music_data.get("supported_formats", config.music.supported_formats)
            ),
            sort_entries=music_data.get("sort_entries", config.music.sort_entries),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            mpv_socket_path=player_data.get("mpv_socket_path"),
            volume=player_data.get("volume", config.player.volume),
            volume_step=player_data.get("volume_step", config.player.volume_step),
        )

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            refresh_ms=ui_data.get("refresh_ms", config.ui.refresh_ms),
            use_colors=ui_data.get("use_colors", config.ui.use_colors),
            show_wave=ui_data.get("show_wave", config.ui.show_wave),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
        )

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables (also read from a .env file in the config
    directory) override TOML values:
    - MUSIC_BROWSER_MPV_SOCKET
    - MUSIC_BROWSER_LOG_LEVEL
    """
    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            print(f"Created default configuration at: {config_path}")
        except OSError as e:
            print(f"Could not create default configuration at {config_path}: {e}")
        config = Config()
    else:
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
            config = parse_config(toml_data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError, AttributeError) as e:
            print(f"Error loading configuration from {config_path}: {e}")
            print("Using default configuration.")
            config = Config()

    _apply_env_overrides(config)

    for warning in validate_config(config):
        print(f"Warning: {warning}")

    return config
