"""Tests for keyboard navigation over the descending order."""

from __future__ import annotations

import pytest

from subboard.navigation import (
    Selection,
    move_down,
    move_up,
    neighbors,
    next_of,
    previous,
)
from subboard.store import PaperStore


@pytest.fixture
def ordered(make_paper):
    """Three papers; descending order is 3, 2, 1."""
    store = PaperStore()
    store.upsert([make_paper(pid=pid, offset=pid) for pid in (1, 2, 3)])
    return store.ordered_descending()


class TestNeighbors:
    def test_middle_entry_has_both(self, ordered):
        assert neighbors(ordered, 2) == (3, 1)

    def test_first_has_no_previous(self, ordered):
        assert previous(ordered, 3) is None
        assert next_of(ordered, 3) == 2

    def test_last_has_no_next(self, ordered):
        assert next_of(ordered, 1) is None
        assert previous(ordered, 1) == 2

    def test_unknown_id(self, ordered):
        assert neighbors(ordered, 99) == (None, None)

    def test_single_entry(self, make_paper):
        assert neighbors([make_paper(pid=5)], 5) == (None, None)


class TestMoves:
    def test_move_down_selects_captured_successor(self, ordered):
        selection = Selection()
        selection.open(None, 3, 2)

        assert move_down(selection, ordered) is True
        assert (selection.before, selection.target, selection.after) == (3, 2, 1)

    def test_move_up_selects_captured_predecessor(self, ordered):
        selection = Selection()
        selection.open(2, 1, None)

        assert move_up(selection, ordered) is True
        assert (selection.before, selection.target, selection.after) == (3, 2, 1)

    def test_move_up_at_top_is_noop(self, ordered):
        selection = Selection()
        selection.open(None, 3, 2)

        assert move_up(selection, ordered) is False
        assert (selection.before, selection.target, selection.after) == (None, 3, 2)

    def test_move_down_at_bottom_is_noop(self, ordered):
        selection = Selection()
        selection.open(2, 1, None)

        assert move_down(selection, ordered) is False
        assert selection.target == 1

    def test_move_without_selection_is_noop(self, ordered):
        selection = Selection()
        assert move_down(selection, ordered) is False
        assert move_up(selection, ordered) is False
        assert selection.target is None

    def test_neighbour_recomputed_from_live_order(self, make_paper):
        store = PaperStore()
        store.upsert([make_paper(pid=1, offset=0), make_paper(pid=2, offset=1)])
        selection = Selection()
        selection.open(2, 1, None)
        # A newer paper arrives after the selection was captured
        store.upsert([make_paper(pid=3, offset=5)])

        move_up(selection, store.ordered_descending())

        assert (selection.before, selection.target, selection.after) == (3, 2, 1)

    def test_clear(self):
        selection = Selection(target=1, before=2, after=3)
        selection.clear()
        assert selection == Selection()
