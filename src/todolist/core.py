"""List navigation helpers (pure functions, no I/O).

Every helper takes a list of item strings and a 0-based cursor into it.
Helpers that can move the cursor return the new cursor; helpers that reorder
or remove items mutate the list in place.
"""

from typing import List


def list_up(cursor: int) -> int:
    """Move the cursor one item up, stopping at the first item."""
    if cursor > 0:
        return cursor - 1
    return cursor


def list_down(items: List[str], cursor: int) -> int:
    """Move the cursor one item down, stopping at the last item."""
    if cursor + 1 < len(items):
        return cursor + 1
    return cursor


def list_first(cursor: int) -> int:
    if cursor > 0:
        return 0
    return cursor


def list_last(items: List[str], cursor: int) -> int:
    if items:
        return len(items) - 1
    return cursor


def list_drag_up(items: List[str], cursor: int) -> int:
    """Swap the item under the cursor with the one above it and follow it."""
    if cursor > 0:
        items[cursor], items[cursor - 1] = items[cursor - 1], items[cursor]
        return cursor - 1
    return cursor


def list_drag_down(items: List[str], cursor: int) -> int:
    """Swap the item under the cursor with the one below it and follow it."""
    if cursor + 1 < len(items):
        items[cursor], items[cursor + 1] = items[cursor + 1], items[cursor]
        return cursor + 1
    return cursor


def _clamp_after_removal(items: List[str], cursor: int) -> int:
    if cursor >= len(items) and items:
        return len(items) - 1
    return cursor


def list_delete(items: List[str], cursor: int) -> int:
    """Remove the item under the cursor, if there is one.

    The cursor stays put unless it fell off the end, in which case it moves to
    the new last item. An emptied list leaves the cursor as it was.
    """
    if cursor < len(items):
        del items[cursor]
        return _clamp_after_removal(items, cursor)
    return cursor


def list_transfer(dst: List[str], src: List[str], src_cursor: int) -> int:
    """Move the item under src_cursor to the end of dst.

    Returns the new cursor for src; dst has no cursor of its own here.
    """
    if src_cursor < len(src):
        dst.append(src.pop(src_cursor))
        return _clamp_after_removal(src, src_cursor)
    return src_cursor
