"""Tests for the list navigation helpers."""

import pytest

from todolist.core import (
    list_delete,
    list_down,
    list_drag_down,
    list_drag_up,
    list_first,
    list_last,
    list_transfer,
    list_up,
)


class TestMovement:
    """Cursor moves stay inside the list."""

    def test_up_stops_at_first(self):
        assert list_up(2) == 1
        assert list_up(0) == 0

    def test_down_stops_at_last(self):
        items = ["a", "b", "c"]
        assert list_down(items, 0) == 1
        assert list_down(items, 2) == 2

    def test_down_on_empty_list(self):
        assert list_down([], 0) == 0

    def test_first(self):
        assert list_first(3) == 0
        assert list_first(0) == 0

    def test_last(self):
        assert list_last(["a", "b", "c"], 0) == 2

    def test_last_on_empty_list_keeps_cursor(self):
        assert list_last([], 0) == 0

    def test_down_after_last_is_noop(self):
        items = ["a", "b", "c", "d"]
        cursor = list_last(items, 1)
        assert list_down(items, cursor) == cursor == 3


class TestDrag:
    """Dragging swaps neighbours and the cursor follows the item."""

    def test_drag_up(self):
        items = ["a", "b", "c"]
        assert list_drag_up(items, 2) == 1
        assert items == ["a", "c", "b"]

    def test_drag_up_at_top_is_noop(self):
        items = ["a", "b"]
        assert list_drag_up(items, 0) == 0
        assert items == ["a", "b"]

    def test_drag_down(self):
        items = ["a", "b", "c"]
        assert list_drag_down(items, 0) == 1
        assert items == ["b", "a", "c"]

    def test_drag_down_at_bottom_is_noop(self):
        items = ["a", "b"]
        assert list_drag_down(items, 1) == 1
        assert items == ["a", "b"]

    @pytest.mark.parametrize("cursor", [1, 2])
    def test_drag_up_then_down_restores_order(self, cursor):
        items = ["a", "b", "c"]
        cursor_after = list_drag_down(items, list_drag_up(items, cursor))
        assert items == ["a", "b", "c"]
        assert cursor_after == cursor

    @pytest.mark.parametrize("cursor", [0, 1])
    def test_drag_down_then_up_restores_order(self, cursor):
        items = ["a", "b", "c"]
        cursor_after = list_drag_up(items, list_drag_down(items, cursor))
        assert items == ["a", "b", "c"]
        assert cursor_after == cursor


class TestDelete:
    """Deleting removes the item under the cursor and re-clamps."""

    def test_delete_middle_keeps_cursor(self):
        items = ["a", "b", "c"]
        assert list_delete(items, 1) == 1
        assert items == ["a", "c"]

    def test_delete_last_moves_cursor_up(self):
        items = ["a", "b", "c"]
        assert list_delete(items, 2) == 1
        assert items == ["a", "b"]

    def test_delete_only_item(self):
        items = ["a"]
        assert list_delete(items, 0) == 0
        assert items == []

    def test_delete_out_of_range_is_noop(self):
        items = []
        assert list_delete(items, 0) == 0
        assert items == []


class TestTransfer:
    """Transfer moves an item to the end of the other list."""

    def test_transfer_appends_to_destination(self):
        src = ["a", "b", "c"]
        dst = ["x"]
        cursor = list_transfer(dst, src, 1)
        assert src == ["a", "c"]
        assert dst == ["x", "b"]
        assert cursor == 1

    def test_transfer_changes_lengths_by_one(self):
        src = ["a", "b"]
        dst = ["x", "y"]
        moved = src[1]
        list_transfer(dst, src, 1)
        assert len(src) == 1
        assert len(dst) == 3
        assert dst[-1] == moved

    def test_transfer_last_item_clamps_cursor(self):
        src = ["a", "b"]
        dst = []
        assert list_transfer(dst, src, 1) == 0
        assert dst == ["b"]

    def test_transfer_from_empty_is_noop(self):
        src = []
        dst = ["x"]
        assert list_transfer(dst, src, 0) == 0
        assert dst == ["x"]
