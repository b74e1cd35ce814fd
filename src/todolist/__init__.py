"""todolist - a two-panel TODO/DONE list editor for the terminal."""

__version__ = "1.0.0"

from .models import Status, parse_item, format_item
from .storage import IllFormedItemError, read_file, write_file, loads, dumps
from .core import (
    list_up,
    list_down,
    list_first,
    list_last,
    list_drag_up,
    list_drag_down,
    list_delete,
    list_transfer,
)
from .ui import Ui, KeyEvent, Layout, LayoutKind, Vec2, UnbalancedLayoutError

__all__ = [
    "Status",
    "parse_item",
    "format_item",
    "IllFormedItemError",
    "read_file",
    "write_file",
    "loads",
    "dumps",
    "list_up",
    "list_down",
    "list_first",
    "list_last",
    "list_drag_up",
    "list_drag_down",
    "list_delete",
    "list_transfer",
    "Ui",
    "KeyEvent",
    "Layout",
    "LayoutKind",
    "Vec2",
    "UnbalancedLayoutError",
]
