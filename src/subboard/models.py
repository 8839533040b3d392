"""Data models and constants for the SubBoard moderation console."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Application identity: single source of truth for platformdirs config paths
CONFIG_APP_NAME = "subboard"

# Refresh loop timing (seconds)
INITIAL_REFRESH_DELAY = 0.0
REFRESH_INTERVAL_SECONDS = 45.0
BUSY_RETRY_SECONDS = 30.0

# Accept request styles understood by the backend
ACCEPT_STYLES = ("query", "json")

DEFAULT_ACCENT_COLOR = "#000000"


class Decision(Enum):
    """Moderation outcome for a paper."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def from_processed(cls, processed: bool | None) -> Decision:
        """Map the backend's nullable ``processed`` flag to a decision."""
        if processed is None:
            return cls.PENDING
        return cls.ACCEPTED if processed else cls.REJECTED


@dataclass(slots=True)
class Paper:
    """A submission record awaiting or holding a moderation decision."""

    pid: int
    name: str
    info: str
    submitted_at: datetime
    email: str | None = None
    color: str = DEFAULT_ACCENT_COLOR
    decision: Decision = Decision.PENDING

    @property
    def is_pending(self) -> bool:
        return self.decision is Decision.PENDING


@dataclass(slots=True)
class ConsoleConfig:
    """Startup configuration read from ``config.toml``."""

    host_url: str
    global_mapping: str
    paper_need_process_mapping: str
    process_paper_mapping: str
    font: str
    accept_style: str = "query"  # "query" | "json"


@dataclass(frozen=True, slots=True)
class Endpoints:
    """Backend URLs derived once from the configuration."""

    pending_list: str
    accept: str

    @classmethod
    def from_config(cls, config: ConsoleConfig) -> Endpoints:
        base = f"{config.host_url}{config.global_mapping}"
        return cls(
            pending_list=f"{base}/{config.paper_need_process_mapping}",
            accept=f"{base}/{config.process_paper_mapping}",
        )


__all__ = [
    "ACCEPT_STYLES",
    "BUSY_RETRY_SECONDS",
    "CONFIG_APP_NAME",
    "DEFAULT_ACCENT_COLOR",
    "INITIAL_REFRESH_DELAY",
    "REFRESH_INTERVAL_SECONDS",
    "ConsoleConfig",
    "Decision",
    "Endpoints",
    "Paper",
]
