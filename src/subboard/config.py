"""Configuration loading: discovery and validation of ``config.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import httpx
from platformdirs import user_config_dir

from subboard.models import ACCEPT_STYLES, CONFIG_APP_NAME, ConsoleConfig

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration
# ============================================================================
#
# The file is a flat TOML table. Every key below is required; there are no
# defaults for the backend address, so any problem is fatal at startup.
#
#   Key                           Used for
#   ────────────────────────────  ───────────────────────────────────────
#   host_url                      scheme + host, e.g. "http://127.0.0.1:8080"
#   global_mapping                controller prefix, e.g. "/paper"
#   paper_need_process_mapping    pending-list GET path segment
#   process_paper_mapping         accept POST path segment
#   font                          preferred display font
#   accept_style (optional)       "query" (default) or "json"
#
CONFIG_FILENAME = "config.toml"

REQUIRED_KEYS = (
    "host_url",
    "global_mapping",
    "paper_need_process_mapping",
    "process_paper_mapping",
    "font",
)


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def get_config_path() -> Path:
    """Get the per-user configuration file path.

    Uses platformdirs for cross-platform config directory:
    - Linux: ~/.config/subboard/config.toml
    - macOS: ~/Library/Application Support/subboard/config.toml
    - Windows: %APPDATA%/subboard/config.toml
    """
    return Path(user_config_dir(CONFIG_APP_NAME)) / CONFIG_FILENAME


def find_config_path(explicit: Path | None = None, cwd: Path | None = None) -> Path:
    """Resolve which config file to read.

    An explicit path wins; otherwise ``./config.toml`` is preferred over the
    per-user file. The returned path may not exist.
    """
    if explicit is not None:
        return explicit
    local = (cwd or Path.cwd()) / CONFIG_FILENAME
    if local.exists():
        return local
    return get_config_path()


def _dict_to_config(data: dict[str, Any], path: Path | None = None) -> ConsoleConfig:
    """Validate a parsed TOML table and build a ConsoleConfig."""
    values: dict[str, str] = {}
    for key in REQUIRED_KEYS:
        if key not in data:
            raise ConfigError(f"missing required key {key!r}", path)
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"key {key!r} must be a string, got {type(value).__name__}", path)
        values[key] = value
    host_url = values["host_url"].strip()
    if not host_url:
        raise ConfigError("key 'host_url' must not be empty", path)
    try:
        url = httpx.URL(host_url)
    except httpx.InvalidURL as exc:
        raise ConfigError(f"key 'host_url' is not a valid URL: {exc}", path) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(
            f"key 'host_url' must be an http:// or https:// address, got {host_url!r}", path
        )

    accept_style = data.get("accept_style", "query")
    if accept_style not in ACCEPT_STYLES:
        raise ConfigError(
            f"key 'accept_style' must be one of {', '.join(ACCEPT_STYLES)}, got {accept_style!r}",
            path,
        )
    unknown = sorted(set(data) - set(REQUIRED_KEYS) - {"accept_style"})
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    return ConsoleConfig(
        host_url=host_url.rstrip("/"),
        global_mapping=values["global_mapping"],
        paper_need_process_mapping=values["paper_need_process_mapping"],
        process_paper_mapping=values["process_paper_mapping"],
        font=values["font"],
        accept_style=accept_style,
    )


def load_config(path: Path | None = None) -> ConsoleConfig:
    """Load and validate the configuration file.

    Raises ConfigError when the file is missing, unreadable, not valid TOML,
    or lacks a required key.
    """
    config_path = find_config_path(path)
    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise ConfigError(f"configuration file {config_path} not found", config_path) from e
    except OSError as e:
        raise ConfigError(f"could not read {config_path}: {e}", config_path) from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"{config_path} is not valid TOML: {e}", config_path) from e

    config = _dict_to_config(data, config_path)
    logger.debug("Loaded config from %s (font=%s)", config_path, config.font)
    return config


__all__ = [
    "CONFIG_APP_NAME",
    "CONFIG_FILENAME",
    "REQUIRED_KEYS",
    "ConfigError",
    "find_config_path",
    "get_config_path",
    "load_config",
]
