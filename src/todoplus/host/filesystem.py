"""File-backed host used by the command line and the tests."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import EditConflictError
from ..models import Edit, Notification, Selection, Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenedLocation:
    """A file location the core asked the host to show."""

    path: Path
    focus: bool = True
    line_number: int | None = None
    start_col: int | None = None
    end_col: int | None = None


class FileHost:
    """
    Host implementation over a single text file on disk.

    Lines are read when the host is created (or on ``reload``) and written
    back in one atomic replace whenever edits are applied. Notifications,
    opened locations and new buffers are recorded so callers can print
    or inspect them.
    """

    def __init__(
        self,
        path: Path | None = None,
        lines: list[str] | None = None,
        root_path: Path | None = None,
        selections: list[Selection] | None = None,
        buffer_path: Path | None = None,
        write: bool = True,
    ) -> None:
        """
        Initialize the host.

        Args:
            path: The todo file; read immediately if it exists
            lines: Initial content; when given, path is not read
            root_path: Project root (defaults to the file's directory)
            selections: Initial selections (defaults to a caret on line 0)
            buffer_path: Where ``open_buffer`` content is written, if anywhere
            write: Whether applied edits are written back to ``path``
        """
        self._path = path
        self._root_path = root_path if root_path is not None else (path.parent if path else None)
        self._lines: list[str] = list(lines or [])
        self._trailing_newline = True
        self._selections: list[Selection] = list(selections or [Selection.caret(0)])
        self.buffer_path = buffer_path
        self._write_enabled = write
        self.notifications: list[Notification] = []
        self.opened: list[OpenedLocation] = []
        self.buffers: list[str] = []
        if path is not None and lines is None and path.exists():
            self.reload()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def root_path(self) -> Path | None:
        return self._root_path

    def reload(self) -> None:
        """Re-read the file from disk."""
        if self._path is None:
            return
        text = self._path.read_text(encoding="utf-8")
        self._trailing_newline = text.endswith("\n") or not text
        self._lines = text.splitlines()
        logger.debug("Loaded %d lines from %s", len(self._lines), self._path)

    def get_lines(self) -> list[str]:
        return list(self._lines)

    def get_selections(self) -> list[Selection]:
        return list(self._selections)

    def set_selections(self, selections: list[Selection]) -> None:
        self._selections = list(selections)

    def apply_edits(self, edits: list[Edit]) -> bool:
        """Apply every edit or none of them."""
        lines = list(self._lines)
        seen: dict[int, str] = {}
        for edit in edits:
            if edit.line_number >= len(lines):
                logger.warning("Rejecting batch: line %d out of range", edit.line_number)
                return False
            previous = seen.get(edit.line_number)
            if previous is not None and previous != edit.new_raw_text:
                raise EditConflictError(edit.line_number)
            seen[edit.line_number] = edit.new_raw_text
            lines[edit.line_number] = edit.new_raw_text
        return self.replace_lines(lines)

    def replace_lines(self, lines: list[str]) -> bool:
        self._lines = list(lines)
        if self._path is not None and self._write_enabled:
            self._write()
        return True

    def _write(self) -> None:
        """Write lines to a temp file next to the target, then swap it in."""
        content = "\n".join(self._lines)
        if self._trailing_newline and self._lines:
            content += "\n"
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.replace(temp_name, self._path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d lines to %s", len(self._lines), self._path)

    def open_file(
        self,
        path: Path,
        focus: bool = True,
        line_number: int | None = None,
        start_col: int | None = None,
        end_col: int | None = None,
    ) -> None:
        location = OpenedLocation(path, focus, line_number, start_col, end_col)
        self.opened.append(location)
        logger.info("Open %s (line=%s)", path, line_number)

    def make_file(self, path: Path, content: str) -> None:
        if path.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Created %s", path)

    def open_buffer(self, content: str, language: str = "html") -> None:
        self.buffers.append(content)
        if self.buffer_path is not None:
            self.buffer_path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s buffer to %s", language, self.buffer_path)

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.notifications.append(Notification(message=message, severity=severity))
        if severity == Severity.ERROR:
            logger.warning("Notification: %s", message)
        else:
            logger.info("Notification: %s", message)
