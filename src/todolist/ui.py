"""Immediate-mode UI: layouts, labels and an editable text field.

A `Ui` lives for exactly one frame. Widgets draw themselves as soon as they are
emitted and then grow the enclosing layout, so the next widget lands right
after them along the layout's axis.
"""

import contextlib
import curses
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

REGULAR_PAIR = 1
HIGHLIGHT_PAIR = 2

BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)


class UnbalancedLayoutError(AssertionError):
    """Layout begin/end calls do not pair up, or a widget has no layout."""


@dataclass(frozen=True)
class Vec2:
    x: int = 0
    y: int = 0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x * other.x, self.y * other.y)


class LayoutKind(Enum):
    VERT = auto()
    HORZ = auto()


@dataclass
class Layout:
    """A box that stacks its children along one axis."""

    kind: LayoutKind
    pos: Vec2
    size: Vec2 = field(default_factory=Vec2)

    def available_pos(self) -> Vec2:
        """Where the next child goes."""
        if self.kind is LayoutKind.HORZ:
            return self.pos + self.size * Vec2(1, 0)
        return self.pos + self.size * Vec2(0, 1)

    def add_widget(self, size: Vec2) -> None:
        """Grow along the primary axis, take the max along the cross axis."""
        if self.kind is LayoutKind.HORZ:
            self.size = Vec2(self.size.x + size.x, max(self.size.y, size.y))
        else:
            self.size = Vec2(max(self.size.x, size.x), self.size.y + size.y)


class KeyEvent:
    """The single key waiting to be handled this frame.

    A handler `take()`s the key; if it does not recognise it, it must `put()`
    it back so that an enclosing handler gets a chance.
    """

    def __init__(self, key: Optional[int] = None):
        self.key = key

    def peek(self) -> Optional[int]:
        return self.key

    def take(self) -> Optional[int]:
        key, self.key = self.key, None
        return key

    def put(self, key: int) -> None:
        self.key = key

    def __bool__(self) -> bool:
        return self.key is not None


class Ui:
    """One frame's worth of layout state.

    `screen` needs a single method, `draw_text(pos, text, pair)`.
    """

    def __init__(self, screen, event: Optional[KeyEvent] = None):
        self.screen = screen
        self.event = event if event is not None else KeyEvent()
        self.layouts: List[Layout] = []

    def begin(self, pos: Vec2, kind: LayoutKind) -> None:
        if self.layouts:
            raise UnbalancedLayoutError("Ui.begin() called while a frame is already open")
        self.layouts.append(Layout(kind, pos))

    def begin_layout(self, kind: LayoutKind) -> None:
        if not self.layouts:
            raise UnbalancedLayoutError(
                "Can't create a layout outside of Ui.begin() and Ui.end()"
            )
        self.layouts.append(Layout(kind, self.layouts[-1].available_pos()))

    def end_layout(self) -> None:
        if len(self.layouts) < 2:
            raise UnbalancedLayoutError(
                "Unbalanced Ui.begin_layout() and Ui.end_layout() calls"
            )
        layout = self.layouts.pop()
        self.layouts[-1].add_widget(layout.size)

    def end(self) -> Layout:
        """Close the frame and return the root layout."""
        if len(self.layouts) != 1:
            raise UnbalancedLayoutError("Unbalanced Ui.begin() and Ui.end() calls")
        return self.layouts.pop()

    def _abandon(self) -> None:
        # An exception abandons the whole frame without a balance check.
        self.layouts.clear()

    @contextlib.contextmanager
    def frame(self, pos: Vec2, kind: LayoutKind) -> Iterator["Ui"]:
        self.begin(pos, kind)
        try:
            yield self
        except BaseException:
            self._abandon()
            raise
        self.end()

    @contextlib.contextmanager
    def layout(self, kind: LayoutKind) -> Iterator["Ui"]:
        self.begin_layout(kind)
        try:
            yield self
        except BaseException:
            self._abandon()
            raise
        self.end_layout()

    def _top(self, what: str) -> Layout:
        if not self.layouts:
            raise UnbalancedLayoutError(f"Trying to render {what} outside of any layout")
        return self.layouts[-1]

    def label_fixed_width(self, text: str, width: int, pair: int) -> None:
        """Draw text and reserve `width` x 1 cells for it.

        The text is not cut to `width`; a longer text overflows to the right.
        """
        layout = self._top("label")
        self.screen.draw_text(layout.available_pos(), text, pair)
        layout.add_widget(Vec2(width, 1))

    def label(self, text: str, pair: int) -> None:
        self.label_fixed_width(text, len(text), pair)

    def edit_field(self, buffer: str, cursor: int, width: int) -> Tuple[str, int]:
        """Single-line text field.

        Consumes the pending key if it is an editing key, draws the buffer with
        the cursor cell highlighted and returns the new (buffer, cursor).
        """
        layout = self._top("edit field")
        pos = layout.available_pos()

        cursor = max(0, min(cursor, len(buffer)))

        key = self.event.take()
        if key is None:
            pass
        elif 32 <= key <= 126:
            buffer = buffer[:cursor] + chr(key) + buffer[cursor:]
            cursor += 1
        elif key == curses.KEY_LEFT:
            if cursor > 0:
                cursor -= 1
        elif key == curses.KEY_RIGHT:
            if cursor < len(buffer):
                cursor += 1
        elif key in BACKSPACE_KEYS:
            if cursor > 0:
                cursor -= 1
                if cursor < len(buffer):
                    buffer = buffer[:cursor] + buffer[cursor + 1:]
        elif key == curses.KEY_DC:
            if cursor < len(buffer):
                buffer = buffer[:cursor] + buffer[cursor + 1:]
        else:
            self.event.put(key)

        self.screen.draw_text(pos, buffer, REGULAR_PAIR)
        layout.add_widget(Vec2(width, 1))

        under_cursor = buffer[cursor:cursor + 1] or " "
        self.screen.draw_text(pos + Vec2(cursor, 0), under_cursor, HIGHLIGHT_PAIR)

        return buffer, cursor
