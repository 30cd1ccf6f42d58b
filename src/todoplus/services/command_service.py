"""Service running user commands against the host's active document."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..config import toggle_timer
from ..document import Document
from ..exceptions import TodoPlusError, UnsupportedDocumentError
from ..host import HostProtocol
from ..models import EditBatch, Severity, TodoPlusConfig
from ..todo import Todo
from ..utils import now_local
from .archive_service import ArchiveService
from .edit_service import EditService
from .export_service import ExportService
from .file_service import FileService

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "This document isn't a todo file"
APPLY_FAILED_MESSAGE = "The edits could not be applied"


def _any_todo(todo: Todo) -> bool:
    return True


@dataclass(frozen=True)
class TodoCommand:
    """How to run one todo transition over the selected lines."""

    method: str
    check_validity: bool = False
    filter: Callable[[Todo], bool] = _any_todo
    invalid_message: str = "Only todos can perform this action"
    filtered_message: str = "This todo cannot perform this action"


TOGGLE_BOX = TodoCommand("toggle_box")
TOGGLE_DONE = TodoCommand("toggle_done")
TOGGLE_CANCELLED = TodoCommand("toggle_cancelled")
TOGGLE_START = TodoCommand(
    "toggle_start",
    check_validity=True,
    filter=Todo.is_box,
    invalid_message="Only todos can be started",
    filtered_message="Only not done/cancelled todos can be started",
)


class CommandService:
    """
    Service for the commands a user can invoke.

    Each command rebuilds the document from the host's current text, runs
    to completion and reports problems as notifications instead of raising.
    """

    def __init__(
        self,
        host: HostProtocol,
        config: TodoPlusConfig | None = None,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        self.host = host
        self.config = config or TodoPlusConfig.default()
        self.clock = clock
        self.edit_service = EditService(self.config)
        self.export_service = ExportService(self.config)
        self.archive_service = ArchiveService(self.config)
        self.file_service = FileService(host, self.config)

    def _document(self) -> Document:
        return Document(self.host, self.config)

    def _supported_document(self) -> Document | None:
        document = self._document()
        try:
            document.require_supported()
        except UnsupportedDocumentError as e:
            logger.debug(str(e))
            self.host.notify(UNSUPPORTED_MESSAGE, Severity.ERROR)
            return None
        return document

    def run_todo_command(self, command: TodoCommand) -> EditBatch | None:
        """
        Run a todo transition on every selected line.

        Lines that aren't todos, or todos failing the command's filter, are
        reported once each and dropped; the rest are still processed.

        Returns:
            The applied batch, or None if nothing was applied.
        """
        document = self._supported_document()
        if document is None:
            return None

        selections = self.host.get_selections()
        lines_before = self.host.get_lines()
        line_numbers = sorted({n for selection in selections for n in selection.line_numbers})

        todos = [
            todo
            for n in line_numbers
            if (todo := document.get_todo_at(n, command.check_validity)) is not None
        ]
        if len(todos) != len(line_numbers):
            logger.debug(
                "%s: %d of %d lines are not todos",
                command.method,
                len(line_numbers) - len(todos),
                len(line_numbers),
            )
            self.host.notify(command.invalid_message, Severity.ERROR)
        if not todos:
            return None

        filtered = [todo for todo in todos if command.filter(todo)]
        if len(filtered) != len(todos):
            self.host.notify(command.filtered_message, Severity.ERROR)
        if not filtered:
            return None

        now = self.clock()
        for todo in filtered:
            getattr(todo, command.method)(now)

        try:
            batch = self.edit_service.build(
                (todo.make_edit() for todo in filtered), selections, lines_before
            )
        except TodoPlusError as e:
            logger.warning("%s: %s", command.method, e)
            self.host.notify(str(e), Severity.ERROR)
            return None

        if batch.is_empty:
            logger.debug("%s: no changes", command.method)
            return batch

        if not self.host.apply_edits(batch.edits):
            self.host.notify(APPLY_FAILED_MESSAGE, Severity.ERROR)
            return None

        self.host.set_selections(batch.apply_carets(selections))
        logger.info("%s: %d lines changed", command.method, len(batch.edits))
        return batch

    def toggle_box(self) -> EditBatch | None:
        return self.run_todo_command(TOGGLE_BOX)

    def toggle_done(self) -> EditBatch | None:
        return self.run_todo_command(TOGGLE_DONE)

    def toggle_cancelled(self) -> EditBatch | None:
        return self.run_todo_command(TOGGLE_CANCELLED)

    def toggle_start(self) -> EditBatch | None:
        return self.run_todo_command(TOGGLE_START)

    def toggle_timer(self) -> bool:
        """Flip the timer flag and tell the user."""
        enabled = toggle_timer()
        self.host.notify(f"Timer {'enabled' if enabled else 'disabled'}")
        return enabled

    def archive(self) -> bool:
        """Move finished todos into the archive project."""
        document = self._supported_document()
        if document is None:
            return False
        lines = self.archive_service.archive(document)
        if lines is None:
            return False
        if not self.host.replace_lines(lines):
            self.host.notify(APPLY_FAILED_MESSAGE, Severity.ERROR)
            return False
        return True

    def export_html(self) -> str:
        """Render the document as HTML and open it in a new buffer."""
        content = self.export_service.export_document(self._document())
        self.host.open_buffer(content, "html")
        return content

    def open(self, file_path: Path | None = None, line_number: int | None = None) -> Path | None:
        return self.file_service.open(file_path, line_number)

    def reveal_todo(self, file_path: Path, line_number: int, text: str | None = None) -> None:
        """Show a todo of another file, selecting its text."""
        if file_path == self.host.path:
            lines = self.host.get_lines()
        else:
            try:
                lines = file_path.read_text(encoding="utf-8").splitlines()
            except OSError as e:
                logger.warning("Cannot read %s: %s", file_path, e)
                self.host.notify(f"Cannot open {file_path}", Severity.ERROR)
                return
        raw_line = lines[line_number] if 0 <= line_number < len(lines) else ""
        self.file_service.reveal_todo(file_path, line_number, raw_line, text)
