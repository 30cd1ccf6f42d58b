"""Service moving finished todos into the archive project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import TodoPlusConfig
from ..parsing import parse_project
from ..todo import Todo

if TYPE_CHECKING:
    from ..document import Document

logger = logging.getLogger(__name__)


class ArchiveService:
    """Service for archiving done and cancelled todos."""

    def __init__(self, config: TodoPlusConfig | None = None) -> None:
        self.config = config or TodoPlusConfig.default()

    def find_archive_line(self, document: Document) -> int | None:
        """Line number of the top-level archive project, if present."""
        name = self.config.archive.name
        for line in document.get_lines():
            project = parse_project(line, self.config)
            if project is not None and project.indent_level == 0 and project.name == name:
                return line.line_number
        return None

    def archive(self, document: Document) -> list[str] | None:
        """
        Compute the document text after archiving.

        Finished todos above the archive project move to the top of it,
        re-indented one level and optionally tagged with their projects.
        The archive project is appended when missing.

        Returns:
            The new lines, or None when there is nothing to archive.
        """
        lines = [line.raw_text for line in document.get_lines()]
        archive_line = self.find_archive_line(document)
        boundary = archive_line if archive_line is not None else len(lines)

        moved: dict[int, str] = {}
        for number in range(boundary):
            todo = document.get_todo_at(number)
            if todo is None or not todo.is_finished():
                continue
            moved[number] = self._archived_text(document, todo)

        if not moved:
            logger.debug("Nothing to archive")
            return None

        kept = [text for number, text in enumerate(lines[:boundary]) if number not in moved]
        archived = [moved[number] for number in sorted(moved)]

        if archive_line is not None:
            result = kept + [lines[archive_line]] + archived + lines[archive_line + 1 :]
        else:
            while kept and not kept[-1].strip():
                kept.pop()
            separator = [""] if kept else []
            result = kept + separator + [f"{self.config.archive.name}:"] + archived

        logger.info("Archived %d todos", len(moved))
        return result

    def _archived_text(self, document: Document, todo: Todo) -> str:
        text = self.config.indentation + todo.raw_text[len(todo.indent) :]
        archive = self.config.archive
        if not archive.project_tag:
            return text
        parents = document.get_parent_projects(todo.line_number)
        if not parents:
            return text
        tag = f"{self.config.symbols.tag}project("
        if tag in text:
            return text
        names = archive.project_separator.join(project.name for project in parents)
        stripped = text.rstrip()
        return f"{stripped} {tag}{names}){text[len(stripped):]}"
