"""Tests for the single-flight gate."""

from __future__ import annotations

import pytest

from subboard.inflight import ACCEPT, REFRESH, InFlight


def test_starts_idle():
    gate = InFlight()
    assert gate.idle
    assert len(gate) == 0


def test_begin_and_end_round_trip():
    gate = InFlight()
    ticket = gate.begin(REFRESH)
    assert not gate.idle
    gate.end(ticket)
    assert gate.idle


def test_busy_until_every_ticket_released():
    gate = InFlight()
    refresh = gate.begin(REFRESH)
    accept = gate.begin(ACCEPT)

    gate.end(refresh)
    assert not gate.idle
    assert gate.counts() == {ACCEPT: 1}

    gate.end(accept)
    assert gate.idle


def test_double_release_does_not_free_other_operations():
    gate = InFlight()
    first = gate.begin(REFRESH)
    second = gate.begin(REFRESH)

    gate.end(first)
    gate.end(first)

    assert not gate.idle
    gate.end(second)
    assert gate.idle


def test_end_none_is_ignored():
    gate = InFlight()
    gate.begin(ACCEPT)
    gate.end(None)
    assert len(gate) == 1


def test_unknown_kind_rejected():
    with pytest.raises(ValueError, match="unknown operation kind"):
        InFlight().begin("download")
