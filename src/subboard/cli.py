"""Command-line bootstrap: flags, logging, terminal checks and app launch."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from platformdirs import user_log_dir

from subboard import __version__
from subboard.action_messages import build_config_error, build_no_tty_error
from subboard.config import CONFIG_APP_NAME, ConfigError, load_config
from subboard.models import ConsoleConfig

logger = logging.getLogger(__name__)

DEBUG_LOG_NAME = "debug.log"
DEBUG_LOG_MAX_BYTES = 2 * 1024 * 1024
DEBUG_LOG_BACKUPS = 2

# color mode -> (variable to set, variable to clear)
_COLOR_ENV: dict[str, tuple[str, str]] = {
    "never": ("NO_COLOR", "FORCE_COLOR"),
    "always": ("FORCE_COLOR", "NO_COLOR"),
}


def debug_log_path() -> Path:
    return Path(user_log_dir(CONFIG_APP_NAME)) / DEBUG_LOG_NAME


def _configure_logging(debug: bool) -> None:
    """Send DEBUG records to a rotating file, or silence logging entirely.

    The TUI owns the terminal, so nothing is ever written to stderr.
    """
    if not debug:
        logging.disable(logging.CRITICAL)
        return

    log_file = debug_log_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    )
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def _configure_color_mode(color_mode: str) -> None:
    """Translate ``--color`` into the NO_COLOR / FORCE_COLOR conventions."""
    if color_mode in _COLOR_ENV:
        enable, clear = _COLOR_ENV[color_mode]
        os.environ[enable] = "1"
        os.environ.pop(clear, None)
    else:
        os.environ.pop("FORCE_COLOR", None)


def _validate_interactive_tty() -> bool:
    return all(stream.isatty() for stream in (sys.stdin, sys.stdout))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subboard",
        description="Browse and accept papers waiting in a moderation queue.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="config.toml to use instead of ./config.toml or the user config directory",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"write a debug log to {debug_log_path()}",
    )
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="terminal color mode (default: %(default)s)",
    )
    color.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="shorthand for --color never",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    load_config_fn: Callable[[Path | None], ConsoleConfig] = load_config,
    configure_logging_fn: Callable[[bool], None] = _configure_logging,
    configure_color_mode_fn: Callable[[str], None] = _configure_color_mode,
    validate_interactive_tty_fn: Callable[[], bool] = _validate_interactive_tty,
    app_factory: Callable[..., Any] | None = None,
) -> int:
    """Run the console and return the process exit code.

    0 after a normal quit, 1 when the configuration cannot be used, 2 when
    stdin/stdout are not a terminal.
    """
    args = _build_parser().parse_args(argv)
    configure_color_mode_fn(args.color)
    configure_logging_fn(args.debug)
    logger.debug("subboard %s starting in %s", __version__, Path.cwd())

    try:
        config = load_config_fn(args.config)
    except ConfigError as exc:
        logger.error("Unusable configuration: %s", exc)
        where = None if exc.path is None else str(exc.path)
        print(build_config_error(str(exc), where), file=sys.stderr)
        return 1

    if not validate_interactive_tty_fn():
        print(build_no_tty_error(), file=sys.stderr)
        return 2

    if app_factory is None:
        from subboard.app import SubBoard

        app_factory = SubBoard
    app_factory(config).run()
    logger.debug("subboard exited normally")
    return 0


__all__ = [
    "DEBUG_LOG_NAME",
    "_configure_color_mode",
    "_configure_logging",
    "_validate_interactive_tty",
    "debug_log_path",
    "main",
]
