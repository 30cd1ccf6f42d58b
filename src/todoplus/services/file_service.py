"""Service for locating, creating and opening todo files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..host import HostProtocol
from ..models import Severity, TodoPlusConfig

logger = logging.getLogger(__name__)

NO_PROJECT_MESSAGE = "You have to open a project before being able to open its todo file"


class FileService:
    """Service for todo file navigation."""

    def __init__(self, host: HostProtocol, config: TodoPlusConfig | None = None) -> None:
        self.host = host
        self.config = config or TodoPlusConfig.default()

    def find_todo_file(self, directory: Path) -> Path | None:
        """First configured todo file name present in a directory."""
        for name in self.config.file.names:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def find_wrapper_directory(self, root: Path, start: Path) -> Path | None:
        """
        Closest directory holding a todo file, walking up from ``start``.

        The walk stops at ``root``; directories outside it are never searched.
        """
        root = root.resolve()
        current = start.resolve()
        if current.is_file() or not current.exists():
            current = current.parent
        try:
            current.relative_to(root)
        except ValueError:
            return None
        while True:
            if self.find_todo_file(current) is not None:
                return current
            if current == root:
                return None
            current = current.parent

    def open(self, file_path: Path | None = None, line_number: int | None = None) -> Path | None:
        """
        Open a todo file.

        With a path, open it directly. Otherwise open the todo file of the
        current project, creating it with default content if missing.

        Returns:
            The path that was opened, or None if there was no project.
        """
        if file_path is not None:
            self.host.open_file(file_path, True, line_number)
            return file_path

        root = self.host.root_path
        if root is None:
            self.host.notify(NO_PROJECT_MESSAGE, Severity.ERROR)
            return None

        start = self.host.path or root
        project_dir = self.find_wrapper_directory(root, start) or root
        todo_path = self.find_todo_file(project_dir)

        if todo_path is not None:
            self.host.open_file(todo_path, True, line_number)
            return todo_path

        todo_path = project_dir / self.config.file.default_name
        self.host.make_file(todo_path, self.config.file.default_content)
        logger.info("Created todo file %s", todo_path)
        self.host.open_file(todo_path)
        return todo_path

    def reveal_todo(self, file_path: Path, line_number: int, raw_line: str, text: str | None = None) -> None:
        """Show a todo, selecting its description when it can be found on the line."""
        if text:
            start = raw_line.find(text)
            if start >= 0:
                self.host.open_file(file_path, True, line_number, start, start + len(text))
                return
        self.host.open_file(file_path, True, line_number)
