"""File I/O for the TODO/DONE state file."""

import io
import logging
from typing import Iterable, Iterator, List, Tuple

from .models import Status, format_item, parse_item

logger = logging.getLogger(__name__)


class IllFormedItemError(ValueError):
    """A line of the state file is neither a TODO nor a DONE item."""

    def __init__(self, path: str, lineno: int, line: str, reason: str = "ill-formed item line"):
        self.path = path
        self.lineno = lineno
        self.line = line
        super().__init__(f"{path}:{lineno}: ERROR: {reason}")


def _decode_lines(raw_lines: Iterable[bytes], path: str) -> Iterator[str]:
    for lineno, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IllFormedItemError(path, lineno, repr(raw), "line is not valid UTF-8") from e


def parse_lines(lines: Iterable[str], path: str = "<string>") -> Tuple[List[str], List[str]]:
    """Split state-file lines into (todos, dones), each in file order."""
    todos: List[str] = []
    dones: List[str] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        parsed = parse_item(line)
        if parsed is None:
            raise IllFormedItemError(path, lineno, line)
        status, text = parsed
        if status is Status.TODO:
            todos.append(text)
        else:
            dones.append(text)
    return todos, dones


def loads(text: str, path: str = "<string>") -> Tuple[List[str], List[str]]:
    return parse_lines(io.StringIO(text, newline="\n"), path)


def dumps(todos: List[str], dones: List[str]) -> str:
    """All TODO items first, then all DONE items, one per line."""
    lines = [format_item(Status.TODO, t) for t in todos]
    lines += [format_item(Status.DONE, d) for d in dones]
    return "".join(line + "\n" for line in lines)


def read_file(path: str) -> Tuple[List[str], List[str]]:
    """Load (todos, dones) from path.

    Raises FileNotFoundError if the file does not exist yet, so the caller can
    start with empty lists, and IllFormedItemError on the first bad line
    (including one that is not valid UTF-8).
    """
    with open(path, "rb") as f:
        todos, dones = parse_lines(_decode_lines(f, path), path)
    logger.info("Loaded %d todo and %d done items from %s", len(todos), len(dones), path)
    return todos, dones


def write_file(path: str, todos: List[str], dones: List[str]) -> None:
    """Rewrite the file from in-memory state."""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(dumps(todos, dones))
    logger.info("Saved %d todo and %d done items to %s", len(todos), len(dones), path)
