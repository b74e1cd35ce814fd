"""Item status model and the line format of the state file."""

from enum import Enum
from typing import Optional, Tuple


class Status(Enum):
    """Which of the two lists an item belongs to."""

    TODO = "TODO"
    DONE = "DONE"

    def toggle(self) -> "Status":
        return Status.DONE if self is Status.TODO else Status.TODO

    @property
    def prefix(self) -> str:
        return f"{self.value}: "

    @property
    def marker(self) -> str:
        """Checkbox shown in front of an item of this status."""
        return "[ ]" if self is Status.TODO else "[x]"


def parse_item(line: str) -> Optional[Tuple[Status, str]]:
    """Split a state-file line into (status, text).

    Returns None if the line starts with neither `TODO: ` nor `DONE: `.
    The text after the prefix is kept verbatim, including surrounding spaces.
    """
    for status in Status:
        if line.startswith(status.prefix):
            return status, line[len(status.prefix):]
    return None


def format_item(status: Status, text: str) -> str:
    """Inverse of parse_item, without the trailing newline."""
    return f"{status.prefix}{text}"
