"""Operator-facing copy for startup errors and in-app notices.

Every multi-line message has the same shape: a headline, an optional
``Why:`` line and a ``Fix:`` line telling the operator what to do next.
"""

from __future__ import annotations


def _sentence(text: str) -> str:
    text = text.strip()
    if text and text[-1] not in ".!?":
        text += "."
    return text


def _compose(headline: str, *, fix: str, why: str | None = None) -> str:
    parts = [_sentence(headline)]
    if why:
        parts.append(f"Why: {_sentence(why)}")
    parts.append(f"Fix: {_sentence(fix)}")
    return "\n".join(parts)


def build_config_error(reason: str, config_path: str | None = None) -> str:
    """Startup error for a missing or invalid config.toml."""
    return _compose(
        "Could not start subboard",
        why=reason,
        fix=(
            f"create or correct {config_path or 'config.toml'} with host_url, global_mapping, "
            "paper_need_process_mapping, process_paper_mapping and font"
        ),
    )


def build_no_tty_error() -> str:
    """Startup error for a non-interactive stdin/stdout."""
    return _compose(
        "Could not start subboard",
        why="it needs an interactive terminal for its full-screen UI",
        fix="run subboard directly in a terminal, or use --help for usage",
    )


def build_accept_failed_warning(pid: int) -> str:
    """Notice for an accept request that did not go through."""
    return _compose(
        f"Paper {pid} could not be accepted and is marked rejected for now",
        why="the backend request failed",
        fix="wait for the refresh to show the backend's decision, then retry",
    )


def build_busy_notice() -> str:
    return "A refresh or accept is already in progress."


__all__ = [
    "build_accept_failed_warning",
    "build_busy_notice",
    "build_config_error",
    "build_no_tty_error",
]
