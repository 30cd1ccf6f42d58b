"""Commands that edit a todo file in place."""

import logging
from pathlib import Path

from ..host import FileHost
from ..models import Selection, TodoPlusConfig
from ..services import CommandService
from .output import error, notification, success

logger = logging.getLogger(__name__)

TOGGLE_COMMANDS = ("toggle-box", "toggle-done", "toggle-cancelled", "toggle-start")


def parse_line_range(value: str) -> Selection:
    """
    Parse a 1-based line range like ``3`` or ``3:5`` into a selection.

    A single line places the caret at the end of that line.

    Raises:
        ValueError: If the range is malformed
    """
    start_text, _, end_text = value.partition(":")
    start = int(start_text)
    end = int(end_text) if end_text else start
    if start < 1 or end < start:
        raise ValueError(f"Invalid line range: {value}")
    return Selection.lines(start - 1, end - 1)


def _caret_at_line_end(host: FileHost, selection: Selection) -> Selection:
    lines = host.get_lines()
    if selection.start.line != selection.end.line or selection.start.line >= len(lines):
        return selection
    return Selection.caret(selection.start.line, len(lines[selection.start.line]))


def run_toggle(command: str, path: Path, ranges: list[str], config: TodoPlusConfig) -> int:
    """
    Run a toggle command on lines of a todo file.

    Args:
        command: One of TOGGLE_COMMANDS
        path: The todo file
        ranges: 1-based line ranges ("3" or "3:5")
        config: Loaded configuration

    Returns:
        Exit code (0 = lines changed, 1 = error or nothing changed)
    """
    if not path.is_file():
        error(f"File not found: {path}")
        return 1
    try:
        selections = [parse_line_range(value) for value in ranges]
    except ValueError as e:
        error(str(e))
        return 1

    host = FileHost(path)
    host.set_selections([_caret_at_line_end(host, s) for s in selections])
    service = CommandService(host, config)

    method = command.replace("-", "_")
    logger.debug("Running %s on %s (%d selections)", method, path, len(selections))
    batch = getattr(service, method)()

    for note in host.notifications:
        notification(note)
    if batch is None or batch.is_empty:
        return 1
    success(f"{len(batch.edits)} line(s) updated in {path}")
    return 0


def run_archive(path: Path, config: TodoPlusConfig) -> int:
    """Archive finished todos of a todo file."""
    if not path.is_file():
        error(f"File not found: {path}")
        return 1
    host = FileHost(path)
    archived = CommandService(host, config).archive()
    for note in host.notifications:
        notification(note)
    if not archived:
        return 1
    success(f"Archived finished todos in {path}")
    return 0
