"""
Configuration management for Jotter.

Uses XDG base directories:
- Config: ~/.config/jotter/config.toml
- Data: ~/jotter/ (notes.json lives here)
"""

import logging
import os
from pathlib import Path
from typing import Any

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DATA_HOME = Path.home() / "jotter"

DEFAULT_WEB_PORT = 5000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/jotter)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "jotter"


def get_jotter_home() -> Path:
    """Get the jotter data directory (~/jotter or JOTTER_HOME)."""
    if env_home := os.environ.get("JOTTER_HOME"):
        return Path(env_home)
    return DEFAULT_DATA_HOME


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_db_path() -> Path:
    """Get the path to notes.json."""
    return get_jotter_home() / "notes.json"


def ensure_dirs() -> None:
    """Ensure all required directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_jotter_home().mkdir(parents=True, exist_ok=True)


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist. Sections missing from
    the file fall back to their defaults.
    """
    config = get_default_config()
    config_path = get_config_path()

    if not config_path.exists():
        return config

    # Lazy import tomli only when needed
    import tomli

    with open(config_path, "rb") as f:
        loaded = tomli.load(f)

    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
        else:
            config[section] = values

    return config


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "jotter": {
            "home": str(get_jotter_home()),
        },
        "web": {
            "port": DEFAULT_WEB_PORT,
            "open_browser": True,
        },
        "logging": {
            "level": "WARNING",
        },
    }


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """Configure root logging. JOTTER_LOG_LEVEL wins over config.toml."""
    config = config or load_config()
    level_name = (
        os.environ.get("JOTTER_LOG_LEVEL")
        or config.get("logging", {}).get("level", "WARNING")
    )
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(format=LOG_FORMAT, level=level)
