"""Curses front end: the TODO and DONE panels side by side.

Keymap (focused panel):
    k / j      move up / down          K / J   drag item up / down
    g / G      first / last item       Tab     switch panel
    i          insert item (TODO)      r       rename item
    d          delete item (DONE)      Enter   move item to the other panel
    q          save and quit
While editing an item, Enter finishes the edit.
"""

import curses
import logging
import signal
from typing import List, Optional, Tuple

from .core import (
    list_delete,
    list_down,
    list_drag_down,
    list_drag_up,
    list_first,
    list_last,
    list_transfer,
    list_up,
)
from .models import Status
from .ui import HIGHLIGHT_PAIR, REGULAR_PAIR, KeyEvent, LayoutKind, Ui, Vec2

logger = logging.getLogger(__name__)

FRAME_TIMEOUT_MS = 16  # ~60 FPS
ENTER_KEYS = (10, 13, curses.KEY_ENTER)


class CursesScreen:
    """Drawing surface and key source backed by a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(FRAME_TIMEOUT_MS)

        self.attrs = {REGULAR_PAIR: curses.A_NORMAL, HIGHLIGHT_PAIR: curses.A_REVERSE}
        if curses.has_colors():
            curses.start_color()
            background = -1
            try:
                curses.use_default_colors()
            except curses.error:
                background = curses.COLOR_BLACK
            curses.init_pair(REGULAR_PAIR, curses.COLOR_WHITE, background)
            curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
            self.attrs = {pair: curses.color_pair(pair) for pair in self.attrs}

    def size(self) -> Vec2:
        height, width = self.stdscr.getmaxyx()
        return Vec2(width, height)

    def erase(self) -> None:
        self.stdscr.erase()

    def refresh(self) -> None:
        self.stdscr.refresh()

    def draw_text(self, pos: Vec2, text: str, pair: int) -> None:
        try:
            self.stdscr.addstr(pos.y, pos.x, text, self.attrs.get(pair, curses.A_NORMAL))
        except curses.error:
            # Off-screen, or the text ran into the bottom-right cell.
            pass

    def read_key(self) -> Optional[int]:
        """Next key press, or None once the frame timeout passes without one."""
        key = self.stdscr.getch()
        return None if key == -1 else key


class InterruptFlag:
    """Set by SIGINT, checked by the main loop between frames."""

    def __init__(self):
        self.raised = False
        self._previous = None

    def _handle(self, signum, frame):
        logger.info("Interrupt received, quitting after this frame")
        self.raised = True

    def install(self) -> None:
        self._previous = signal.signal(signal.SIGINT, self._handle)

    def restore(self) -> None:
        if self._previous is not None:
            signal.signal(signal.SIGINT, self._previous)
            self._previous = None

    def __bool__(self) -> bool:
        return self.raised


class TUI:
    """Two-panel TODO/DONE editor driven one frame at a time."""

    def __init__(self, screen, todos: List[str], dones: List[str], notification: str = ""):
        self.screen = screen
        self.lists = {Status.TODO: todos, Status.DONE: dones}
        self.cursors = {Status.TODO: 0, Status.DONE: 0}
        self.panel = Status.TODO
        self.editing = False
        self.editing_cursor = 0
        self.notification = notification
        self.event = KeyEvent()
        self.quit = False

    @property
    def todos(self) -> List[str]:
        return self.lists[Status.TODO]

    @property
    def dones(self) -> List[str]:
        return self.lists[Status.DONE]

    def message(self, text: str):
        self.notification += text

    def draw(self):
        """Render one frame, handling the pending key along the way."""
        self.screen.erase()
        width = self.screen.size().x

        ui = Ui(self.screen, self.event)
        with ui.frame(Vec2(0, 0), LayoutKind.VERT):
            ui.label_fixed_width(self.notification, width, REGULAR_PAIR)
            ui.label_fixed_width("", width, REGULAR_PAIR)

            with ui.layout(LayoutKind.HORZ):
                for status in Status:
                    with ui.layout(LayoutKind.VERT):
                        if status is self.panel:
                            self.draw_focused_panel(ui, status, width // 2)
                        else:
                            self.draw_panel(ui, status, width // 2)

        if self.event.take() == ord("q"):
            self.quit = True

        self.screen.refresh()

    def draw_panel(self, ui: Ui, status: Status, width: int):
        ui.label_fixed_width(status.value, width, REGULAR_PAIR)
        for item in self.lists[status]:
            ui.label_fixed_width(f"- {status.marker} {item}", width, REGULAR_PAIR)

    def draw_focused_panel(self, ui: Ui, status: Status, width: int):
        items = self.lists[status]
        ui.label_fixed_width(status.value, width, HIGHLIGHT_PAIR)

        for index, item in enumerate(items):
            if index != self.cursors[status]:
                ui.label_fixed_width(f"- {status.marker} {item}", width, REGULAR_PAIR)
            elif self.editing:
                items[index], self.editing_cursor = ui.edit_field(item, self.editing_cursor, width)
                # Keys the field did not want are dropped; only Enter means something here.
                if self.event.take() in ENTER_KEYS:
                    self.stop_editing()
            else:
                ui.label_fixed_width(f"- {status.marker} {item}", width, HIGHLIGHT_PAIR)
                if self.event.peek() == ord("r"):
                    self.event.take()
                    self.start_editing(len(item))

        if self.editing:
            return
        key = self.event.take()
        if key is not None and not self.handle_key(status, key):
            self.event.put(key)

    def handle_key(self, status: Status, key: int) -> bool:
        """Run the focused panel's command for key. Returns False if unbound."""
        items = self.lists[status]
        cursor = self.cursors[status]

        if key == ord("K"):
            self.cursors[status] = list_drag_up(items, cursor)
        elif key == ord("J"):
            self.cursors[status] = list_drag_down(items, cursor)
        elif key == ord("k"):
            self.cursors[status] = list_up(cursor)
        elif key == ord("j"):
            self.cursors[status] = list_down(items, cursor)
        elif key == ord("g"):
            self.cursors[status] = list_first(cursor)
        elif key == ord("G"):
            self.cursors[status] = list_last(items, cursor)
        elif key == ord("i"):
            self.insert_item(status)
        elif key == ord("d"):
            self.delete_item(status)
        elif key in ENTER_KEYS:
            self.transfer_item(status)
        elif key == ord("\t"):
            self.panel = self.panel.toggle()
        else:
            return False
        return True

    def start_editing(self, text_cursor: int):
        self.editing = True
        self.editing_cursor = text_cursor
        logger.debug("Editing %s item %d", self.panel.value, self.cursors[self.panel])

    def stop_editing(self):
        self.editing = False
        logger.debug("Finished editing %s item %d", self.panel.value, self.cursors[self.panel])

    def insert_item(self, status: Status):
        if status is not Status.TODO:
            logger.debug("Refused insert into DONE")
            self.message("Can't insert new DONE items. Only TODO is allowed.")
            return
        self.todos.insert(self.cursors[status], "")
        self.start_editing(0)
        self.message("What needs to be done?")

    def delete_item(self, status: Status):
        if status is not Status.DONE:
            logger.debug("Refused delete from TODO")
            self.message("Can't remove items from TODO. Mark it as DONE first.")
            return
        logger.debug("Deleting DONE item %d", self.cursors[status])
        self.cursors[status] = list_delete(self.dones, self.cursors[status])
        self.message("Into The Abyss!")

    def transfer_item(self, status: Status):
        logger.debug(
            "Moving %s item %d to %s", status.value, self.cursors[status], status.toggle().value
        )
        self.cursors[status] = list_transfer(
            self.lists[status.toggle()], self.lists[status], self.cursors[status]
        )
        self.message("DONE!" if status is Status.TODO else "No, not done yet...")

    def poll_input(self):
        """Wait up to one frame for a key and queue it for the next frame."""
        key = self.screen.read_key()
        if key is not None:
            self.notification = ""
            self.event.put(key)

    def run(self, interrupted=None):
        """Main event loop. Stops on `q` or once `interrupted` turns truthy."""
        while not self.quit and not interrupted:
            self.draw()
            self.poll_input()


def start_curses(
    todos: List[str], dones: List[str], notification: str = ""
) -> Tuple[List[str], List[str]]:
    """Initialize curses, run the editor and return the final lists."""
    interrupted = InterruptFlag()

    def _main(stdscr) -> TUI:
        tui = TUI(CursesScreen(stdscr), todos, dones, notification)
        tui.run(interrupted)
        return tui

    interrupted.install()
    try:
        tui = curses.wrapper(_main)
    finally:
        interrupted.restore()
    return tui.todos, tui.dones
