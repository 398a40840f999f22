"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML + .env overrides)
- Logging (Loguru)
- Console output (Rich)
"""

from .config import (
    Config,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)
from .console import get_console, safe_print
from .output import setup_loguru

__all__ = [
    # Config
    "Config",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    # Logging
    "setup_loguru",
    # Console
    "get_console",
    "safe_print",
]
