"""Tests for command execution."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from subboard.effects import failed_result, perform
from subboard.inflight import ACCEPT, REFRESH, Ticket
from subboard.messages import (
    Accepted,
    FetchPapers,
    RefreshDone,
    RefreshTick,
    Sleep,
    SubmitAccept,
)


@pytest.mark.asyncio
async def test_sleep_yields_tick() -> None:
    sleep = AsyncMock()
    result = await perform(Sleep(45.0), backend=None, sleep=sleep)
    sleep.assert_awaited_once_with(45.0)
    assert result == RefreshTick()


@pytest.mark.asyncio
async def test_fetch_yields_refresh_done(make_paper, fake_backend) -> None:
    backend = fake_backend([make_paper(pid=1), make_paper(pid=2)])
    ticket = Ticket(REFRESH, 1)

    result = await perform(FetchPapers(ticket), backend)

    assert isinstance(result, RefreshDone)
    assert [p.pid for p in result.papers] == [1, 2]
    assert result.ticket == ticket


@pytest.mark.asyncio
@pytest.mark.parametrize("ok", [True, False])
async def test_submit_accept_yields_accepted(fake_backend, ok) -> None:
    backend = fake_backend(accept_ok=ok)
    ticket = Ticket(ACCEPT, 3)

    result = await perform(SubmitAccept(7, ticket), backend)

    assert result == Accepted(7, ok, ticket)
    assert backend.accept_calls == [7]


@pytest.mark.asyncio
async def test_unknown_command_raises(fake_backend) -> None:
    with pytest.raises(TypeError, match="unhandled command"):
        await perform("sleep", fake_backend())


class TestFailedResult:
    def test_sleep_still_wakes_loop(self) -> None:
        assert failed_result(Sleep(45.0)) == RefreshTick()

    def test_fetch_becomes_empty_refresh(self) -> None:
        ticket = Ticket(REFRESH, 4)
        assert failed_result(FetchPapers(ticket)) == RefreshDone((), ticket)

    def test_accept_becomes_failed_accept(self) -> None:
        ticket = Ticket(ACCEPT, 5)
        assert failed_result(SubmitAccept(8, ticket)) == Accepted(8, False, ticket)

    def test_unknown_command_raises(self) -> None:
        with pytest.raises(TypeError, match="unhandled command"):
            failed_result("sleep")
