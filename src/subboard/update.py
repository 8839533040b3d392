"""The dispatch loop: the single place where console state changes.

``Dispatcher.dispatch`` applies one message, then drains every follow-up it
produced (including ``Batch`` members, depth first and in list order) from an
explicit work queue before returning. Handlers never block: anything that
needs the network or a timer is returned to the host as a ``Command``.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from subboard.action_messages import build_busy_notice
from subboard.inflight import ACCEPT, REFRESH, InFlight
from subboard.messages import (
    Accept,
    Accepted,
    Batch,
    ClearDecided,
    Command,
    FetchPapers,
    KeyPressed,
    ManualRefresh,
    Message,
    OpenPaper,
    Refresh,
    RefreshDone,
    RefreshLoop,
    RefreshTick,
    Sleep,
    SubmitAccept,
    SwitchSplitAxis,
    ToggleAccent,
    ToggleDarkMode,
)
from subboard.models import BUSY_RETRY_SECONDS, REFRESH_INTERVAL_SECONDS, Decision
from subboard.navigation import Selection, move_down, move_up
from subboard.store import PaperStore

logger = logging.getLogger(__name__)

UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
ACCEPT_KEYS = frozenset({"enter"})


class AcceptPhase(Enum):
    SUBMITTING = "submitting"
    ACCEPTED = "accepted"
    FAILED = "failed"


@dataclass(slots=True)
class ConsoleState:
    """Everything the console knows; mutated only by ``Dispatcher``."""

    store: PaperStore = field(default_factory=PaperStore)
    selection: Selection = field(default_factory=Selection)
    inflight: InFlight = field(default_factory=InFlight)
    accepts: dict[int, AcceptPhase] = field(default_factory=dict)
    dark_mode: bool = False
    show_accent: bool = True
    split_vertical: bool = True
    notices: list[str] = field(default_factory=list)

    @property
    def busy(self) -> bool:
        return not self.inflight.idle

    def drain_notices(self) -> list[str]:
        notices, self.notices = self.notices, []
        return notices


class Dispatcher:
    """Applies messages to a ``ConsoleState`` one at a time."""

    def __init__(self, state: ConsoleState | None = None) -> None:
        self.state = state or ConsoleState()

    def dispatch(self, message: Message) -> list[Command]:
        """Apply ``message`` and all of its follow-ups; return async commands."""
        commands: list[Command] = []
        queue: deque[Message] = deque([message])
        while queue:
            current = queue.popleft()
            if isinstance(current, Batch):
                follow_ups = list(current.messages)
            else:
                follow_ups = self._apply(current, commands)
            # Follow-ups run before anything already queued (depth first)
            queue.extendleft(reversed(follow_ups))
        return commands

    def _apply(self, message: Message, commands: list[Command]) -> list[Message]:
        state = self.state
        match message:
            case RefreshLoop(delay=delay):
                commands.append(Sleep(delay))
            case RefreshTick():
                if state.inflight.idle:
                    return [Batch.of(Refresh(), RefreshLoop(REFRESH_INTERVAL_SECONDS))]
                logger.debug(
                    "Refresh skipped, %d operation(s) in flight; retrying in %.0fs",
                    len(state.inflight),
                    BUSY_RETRY_SECONDS,
                )
                return [RefreshLoop(BUSY_RETRY_SECONDS)]
            case Refresh():
                commands.append(FetchPapers(state.inflight.begin(REFRESH)))
            case ManualRefresh():
                if state.inflight.idle:
                    return [Refresh()]
                state.notices.append(build_busy_notice())
            case RefreshDone(papers=papers, ticket=ticket):
                state.inflight.end(ticket)
                state.store.upsert(papers)
                logger.debug(
                    "Refresh merged %d paper(s), store size %d", len(papers), len(state.store)
                )
            case OpenPaper(before=before, target=target, after=after):
                state.selection.open(before, target, after)
                state.show_accent = True
            case KeyPressed(key=key):
                return self._on_key(key)
            case Accept(pid=pid):
                if not state.inflight.idle:
                    state.notices.append(build_busy_notice())
                    return []
                state.accepts[pid] = AcceptPhase.SUBMITTING
                commands.append(SubmitAccept(pid, state.inflight.begin(ACCEPT)))
            case Accepted(pid=pid, ok=ok, ticket=ticket):
                state.inflight.end(ticket)
                if ok:
                    state.accepts[pid] = AcceptPhase.ACCEPTED
                    state.store.set_decision(pid, Decision.ACCEPTED)
                else:
                    logger.error("Accept of paper %d failed; marked rejected until refresh", pid)
                    state.accepts[pid] = AcceptPhase.FAILED
                    state.store.set_decision(pid, Decision.REJECTED)
                return [Refresh()]
            case ClearDecided():
                state.store.clear_decided()
                # Accept outcomes only matter for papers still listed
                state.accepts = {
                    pid: phase
                    for pid, phase in state.accepts.items()
                    if pid in state.store or phase is AcceptPhase.SUBMITTING
                }
            case ToggleDarkMode():
                state.dark_mode = not state.dark_mode
            case ToggleAccent():
                state.show_accent = not state.show_accent
            case SwitchSplitAxis():
                state.split_vertical = not state.split_vertical
            case _:
                raise TypeError(f"unhandled message: {message!r}")
        return []

    def _on_key(self, key: str) -> list[Message]:
        state = self.state
        ordered = state.store.ordered_descending()
        if key in UP_KEYS:
            if move_up(state.selection, ordered):
                state.show_accent = True
        elif key in DOWN_KEYS:
            if move_down(state.selection, ordered):
                state.show_accent = True
        elif key in ACCEPT_KEYS and state.selection.target is not None:
            return [Accept(state.selection.target)]
        return []


__all__ = [
    "ACCEPT_KEYS",
    "DOWN_KEYS",
    "UP_KEYS",
    "AcceptPhase",
    "ConsoleState",
    "Dispatcher",
]
