"""Decoding of backend payloads into Paper records."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from subboard.models import DEFAULT_ACCENT_COLOR, Decision, Paper

logger = logging.getLogger(__name__)

_HEX_RGB_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


class PaperDecodeError(ValueError):
    """Raised when a payload entry cannot be turned into a Paper."""


def parse_timestamp(raw: Any) -> datetime:
    """Parse an ISO 8601 / RFC 3339 timestamp into an aware datetime.

    Naive values are interpreted as local time.
    """
    if not isinstance(raw, str):
        raise PaperDecodeError(f"timestamp must be a string, got {type(raw).__name__}")
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise PaperDecodeError(f"invalid timestamp {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def _require(data: dict[str, Any], key: str, expected_type: type) -> Any:
    value = data.get(key)
    # bool is a subclass of int; a boolean pid is a payload bug
    if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
        raise PaperDecodeError(f"field {key!r} missing or not {expected_type.__name__}")
    return value


def parse_paper(data: Any) -> Paper:
    """Build a Paper from one JSON object of the pending-list endpoint."""
    if not isinstance(data, dict):
        raise PaperDecodeError(f"paper entry must be an object, got {type(data).__name__}")

    email = data.get("email")
    if email is not None and not isinstance(email, str):
        raise PaperDecodeError("field 'email' must be a string or null")
    processed = data.get("processed")
    if processed is not None and not isinstance(processed, bool):
        raise PaperDecodeError("field 'processed' must be a boolean or null")

    return Paper(
        pid=_require(data, "pid", int),
        name=_require(data, "name", str),
        info=_require(data, "info", str),
        submitted_at=parse_timestamp(data.get("time")),
        email=email,
        color=_require(data, "color", str),
        decision=Decision.from_processed(processed),
    )


def parse_paper_list(payload: Any) -> list[Paper]:
    """Decode a pending-list response body.

    A body that is not a JSON array raises ``PaperDecodeError``. Individual
    malformed entries are skipped with a warning.
    """
    if not isinstance(payload, list):
        raise PaperDecodeError(f"expected a JSON array, got {type(payload).__name__}")
    papers: list[Paper] = []
    for index, entry in enumerate(payload):
        try:
            papers.append(parse_paper(entry))
        except PaperDecodeError as exc:
            logger.warning("Skipping malformed paper at index %d: %s", index, exc)
    return papers


def parse_accent_color(raw: str | None) -> str:
    """Normalise an RGB colour string to ``#rrggbb``.

    Never raises: anything unparseable yields ``DEFAULT_ACCENT_COLOR``.
    """
    if not raw:
        return DEFAULT_ACCENT_COLOR
    match = _HEX_RGB_RE.match(raw.strip())
    if match is None:
        return DEFAULT_ACCENT_COLOR
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


__all__ = [
    "PaperDecodeError",
    "parse_accent_color",
    "parse_paper",
    "parse_paper_list",
    "parse_timestamp",
]
