"""Execution of async commands emitted by the dispatch loop."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from subboard.messages import (
    Accepted,
    Command,
    FetchPapers,
    Message,
    RefreshDone,
    RefreshTick,
    Sleep,
    SubmitAccept,
)
from subboard.services.interfaces import PaperBackend


async def perform(
    command: Command,
    backend: PaperBackend,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Message:
    """Run one command to completion and return the message it yields."""
    match command:
        case Sleep(delay=delay):
            await sleep(delay)
            return RefreshTick()
        case FetchPapers(ticket=ticket):
            papers = await backend.fetch_pending()
            return RefreshDone(tuple(papers), ticket)
        case SubmitAccept(pid=pid, ticket=ticket):
            ok = await backend.accept(pid)
            return Accepted(pid, ok, ticket)
        case _:
            raise TypeError(f"unhandled command: {command!r}")


def failed_result(command: Command) -> Message:
    """Message standing in for a command whose execution raised.

    Fetches become empty refreshes and accepts become failed accepts, so the
    ticket is released; a broken timer still wakes the refresh loop.
    """
    match command:
        case Sleep():
            return RefreshTick()
        case FetchPapers(ticket=ticket):
            return RefreshDone((), ticket)
        case SubmitAccept(pid=pid, ticket=ticket):
            return Accepted(pid, False, ticket)
        case _:
            raise TypeError(f"unhandled command: {command!r}")


__all__ = ["failed_result", "perform"]
