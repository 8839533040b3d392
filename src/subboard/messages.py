"""Messages handled by the dispatch loop and the async commands it emits.

Messages describe something that happened (a key press, a timer firing, a
network response). Commands describe asynchronous work for the host to run;
each command completes with exactly one message.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from subboard.inflight import Ticket
from subboard.models import Paper

# ── Messages ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RefreshLoop:
    """Arm the background refresh timer."""

    delay: float


@dataclass(frozen=True, slots=True)
class RefreshTick:
    """The refresh timer fired."""


@dataclass(frozen=True, slots=True)
class Refresh:
    """Fetch the pending list now."""


@dataclass(frozen=True, slots=True)
class ManualRefresh:
    """Operator asked for a refresh; dropped while anything is in flight."""


@dataclass(frozen=True, slots=True)
class RefreshDone:
    papers: tuple[Paper, ...]
    ticket: Ticket | None = None


@dataclass(frozen=True, slots=True)
class OpenPaper:
    """Explicit selection with the neighbours visible at that moment."""

    before: int | None
    target: int
    after: int | None


@dataclass(frozen=True, slots=True)
class KeyPressed:
    key: str


@dataclass(frozen=True, slots=True)
class Accept:
    pid: int


@dataclass(frozen=True, slots=True)
class Accepted:
    pid: int
    ok: bool
    ticket: Ticket | None = None


@dataclass(frozen=True, slots=True)
class ClearDecided:
    pass


@dataclass(frozen=True, slots=True)
class ToggleDarkMode:
    pass


@dataclass(frozen=True, slots=True)
class ToggleAccent:
    """Show or hide the accent-colour background in the detail pane."""


@dataclass(frozen=True, slots=True)
class SwitchSplitAxis:
    pass


@dataclass(frozen=True, slots=True)
class Batch:
    """Several follow-ups applied in list order before control returns."""

    messages: tuple[Message, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *messages: Message) -> Batch:
        return cls(tuple(messages))


Message = (
    RefreshLoop
    | RefreshTick
    | Refresh
    | ManualRefresh
    | RefreshDone
    | OpenPaper
    | KeyPressed
    | Accept
    | Accepted
    | ClearDecided
    | ToggleDarkMode
    | ToggleAccent
    | SwitchSplitAxis
    | Batch
)

# ── Commands ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Sleep:
    """Wait ``delay`` seconds, then deliver ``RefreshTick``."""

    delay: float


@dataclass(frozen=True, slots=True)
class FetchPapers:
    """GET the pending list, then deliver ``RefreshDone``."""

    ticket: Ticket


@dataclass(frozen=True, slots=True)
class SubmitAccept:
    """POST an accept decision, then deliver ``Accepted``."""

    pid: int
    ticket: Ticket


Command = Sleep | FetchPapers | SubmitAccept


__all__ = [
    "Accept",
    "Accepted",
    "Batch",
    "ClearDecided",
    "Command",
    "FetchPapers",
    "KeyPressed",
    "ManualRefresh",
    "Message",
    "OpenPaper",
    "Refresh",
    "RefreshDone",
    "RefreshLoop",
    "RefreshTick",
    "Sleep",
    "SubmitAccept",
    "SwitchSplitAxis",
    "ToggleAccent",
    "ToggleDarkMode",
]
