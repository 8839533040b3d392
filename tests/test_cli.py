"""Tests for the command-line entry point."""

from __future__ import annotations

import logging.handlers
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from subboard.cli import _configure_color_mode, _configure_logging, main
from subboard.config import ConfigError


def _run(argv=None, *, config_error=None, tty=True):
    app = MagicMock()
    factory = MagicMock(return_value=app)
    loader = MagicMock(side_effect=config_error, return_value="config")
    logging_fn = MagicMock()
    code = main(
        argv or [],
        load_config_fn=loader,
        configure_logging_fn=logging_fn,
        configure_color_mode_fn=MagicMock(),
        validate_interactive_tty_fn=lambda: tty,
        app_factory=factory,
    )
    return code, loader, factory, app, logging_fn


def test_runs_app_with_loaded_config():
    code, loader, factory, app, _ = _run()
    assert code == 0
    loader.assert_called_once_with(None)
    factory.assert_called_once_with("config")
    app.run.assert_called_once_with()


def test_config_flag_passes_path():
    _, loader, *_ = _run(["--config", "/tmp/x.toml"])
    loader.assert_called_once_with(Path("/tmp/x.toml"))


def test_debug_flag_enables_logging():
    *_, logging_fn = _run(["--debug"])
    logging_fn.assert_called_once_with(True)


def test_config_error_exits_one(capsys):
    error = ConfigError("missing required key 'font'", Path("/etc/subboard/config.toml"))
    code, _, factory, _, _ = _run(config_error=error)

    assert code == 1
    factory.assert_not_called()
    err = capsys.readouterr().err
    assert "Could not start subboard." in err
    assert "missing required key 'font'" in err
    assert "/etc/subboard/config.toml" in err


def test_non_tty_exits_two(capsys):
    code, _, factory, _, _ = _run(tty=False)
    assert code == 2
    factory.assert_not_called()
    assert "interactive terminal" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("mode", "present", "absent"),
    [("never", "NO_COLOR", "FORCE_COLOR"), ("always", "FORCE_COLOR", "NO_COLOR")],
)
def test_color_modes(monkeypatch, mode, present, absent):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv(absent, "1")

    _configure_color_mode(mode)

    assert os.environ.get(present) == "1"
    assert absent not in os.environ
    monkeypatch.delenv(present)


@pytest.mark.parametrize(
    ("argv", "expected"),
    [([], "auto"), (["--color", "always"], "always"), (["--no-color"], "never")],
)
def test_color_flags(argv, expected):
    color_fn = MagicMock()
    main(
        argv,
        load_config_fn=MagicMock(),
        configure_logging_fn=MagicMock(),
        configure_color_mode_fn=color_fn,
        validate_interactive_tty_fn=lambda: True,
        app_factory=MagicMock(),
    )
    color_fn.assert_called_once_with(expected)


def test_color_flags_are_exclusive():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-color", "--color", "always"], app_factory=MagicMock())
    assert excinfo.value.code == 2


def test_auto_color_clears_force(monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    _configure_color_mode("auto")
    assert "FORCE_COLOR" not in os.environ


def test_debug_logging_writes_rotating_file(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "debug.log"
    monkeypatch.setattr("subboard.cli.debug_log_path", lambda: log_file)
    root = logging.getLogger()
    before = list(root.handlers)
    old_level = root.level
    try:
        _configure_logging(True)
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.handlers.RotatingFileHandler)
        assert log_file.parent.is_dir()
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(old_level)
