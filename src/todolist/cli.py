"""todolist command-line interface."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from . import __version__
from .log import setup_logging
from .storage import IllFormedItemError, read_file, write_file

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_state(path: str) -> Tuple[List[str], List[str], str]:
    """Read the state file, or start empty if it does not exist yet.

    Returns (todos, dones, notification).
    """
    try:
        todos, dones = read_file(path)
    except FileNotFoundError:
        logger.info("No file at %s yet, starting empty", path)
        return [], [], f"New file {path}"
    return todos, dones, f"Loaded file {path}"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="todolist", description="Keyboard-driven TODO/DONE list editor for the terminal."
    )
    p.add_argument("file", help="Path to the state file (created on quit if missing)")
    p.add_argument("--log-file", default=None, help="Append log records to this file")
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for --log-file (default: WARNING)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: load, edit in the TUI, save."""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level, args.log_file)
    except OSError as e:
        sys.exit(f"Could not open log file `{args.log_file}`: {e}")

    try:
        todos, dones, notification = load_state(args.file)
    except IllFormedItemError as e:
        sys.exit(str(e))
    except OSError as e:
        sys.exit(f"Could not load state from file `{args.file}`: {e}")

    from .tui import start_curses

    todos, dones = start_curses(todos, dones, notification)

    try:
        write_file(args.file, todos, dones)
    except OSError as e:
        sys.exit(f"Could not save state to file `{args.file}`: {e}")
    print(f"Saved state to {args.file}")


if __name__ == "__main__":
    main()
