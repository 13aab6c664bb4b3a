"""Configuration management for mkvrelease.

Supports loading configuration from:
1. Environment variables (MKVRELEASE_*)
2. Config file (~/.mkvrelease/config.yaml)
3. Default values

Example config file (~/.mkvrelease/config.yaml):
    api_key: "YOUR_UPTOBOX_TOKEN"
    local_path: "~/Downloads"
    destination_path: "//Films"
    timeout_seconds: 300
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from mkvrelease.errors import ConfigError

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mkvrelease" / "config.yaml",
    Path.home() / ".config" / "mkvrelease" / "config.yaml",
    Path(".mkvrelease.yaml"),
]

# Where write_default_config puts a fresh file
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "mkvrelease" / "config.yaml"

# Written to fresh config files, rejected as a real token
PLACEHOLDER_API_KEY = "uptobox_api_key"


@dataclass
class ReleaseConfig:
    """Main configuration for mkvrelease."""

    api_key: str | None = None
    local_path: str = "~/Downloads"
    destination_path: str = "//"
    timeout_seconds: int = 300

    def __post_init__(self) -> None:
        self.local_path = expand_home(self.local_path)

    @property
    def has_api_key(self) -> bool:
        """Check if a real API token is configured."""
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY


def expand_home(path: str) -> str:
    """Expand a leading ~/ to the user's home directory."""
    if path.startswith("~/") or path == "~":
        return str(Path(path).expanduser())
    return path


def find_config_file() -> Path | None:
    """Return the first existing config file, if any."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            return config_path
    return None


def _load_yaml_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file if available."""
    config_path = path or find_config_file()
    if config_path is None:
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Unable to parse the config file '{config_path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"The config file '{config_path}' must contain a mapping")
    return data


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MKVRELEASE_ prefix."""
    return os.environ.get(f"MKVRELEASE_{key}", default)


def load_config(path: Path | None = None) -> ReleaseConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MKVRELEASE_*)
    2. Config file
    3. Default values
    """
    file_config = _load_yaml_config(path)
    defaults = ReleaseConfig()

    try:
        timeout = int(_get_env("TIMEOUT") or file_config.get("timeout_seconds", defaults.timeout_seconds))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout_seconds: {e}") from e

    return ReleaseConfig(
        api_key=_get_env("API_KEY") or file_config.get("api_key"),
        local_path=_get_env("LOCAL_PATH") or file_config.get("local_path", "~/Downloads"),
        destination_path=_get_env("DESTINATION_PATH")
        or file_config.get("destination_path", defaults.destination_path),
        timeout_seconds=timeout,
    )


def write_default_config(path: Path | None = None) -> Path:
    """Write a config file with default values unless one already exists.

    Returns:
        Path of the config file
    """
    path = path or DEFAULT_CONFIG_PATH
    if path.exists():
        return path

    defaults = asdict(ReleaseConfig())
    defaults["api_key"] = PLACEHOLDER_API_KEY
    defaults["local_path"] = "~/Downloads"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(defaults, f, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Unable to create the config file '{path}': {e}") from e
    return path


# Global config instance (lazy loaded)
_config: ReleaseConfig | None = None


def get_config() -> ReleaseConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
