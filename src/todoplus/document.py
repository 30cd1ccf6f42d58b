"""Document model: classified, addressable lines of one todo file."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import UnsupportedDocumentError
from .host import FileHost, HostProtocol
from .models import Line, LineKind, ParsedLine, Project, TodoPlusConfig
from .parsing import classify, get_grammar, indent_level, parse_project
from .todo import Todo

logger = logging.getLogger(__name__)


class Document:
    """
    All lines of one open todo file.

    Nothing is cached: every query re-reads the host's current text, so a
    Document never hands out stale classifications after an edit.
    """

    def __init__(self, host: HostProtocol, config: TodoPlusConfig | None = None) -> None:
        self.host = host
        self.config = config or TodoPlusConfig.default()
        self._grammar = get_grammar(self.config)

    @classmethod
    def from_text(
        cls, text: str, path: Path | None = None, config: TodoPlusConfig | None = None
    ) -> Document:
        """Build a document over in-memory text."""
        host = FileHost(path=path, lines=text.splitlines(), write=False)
        return cls(host, config)

    @property
    def path(self) -> Path | None:
        return self.host.path

    # --- Lines ---

    def get_lines(self) -> list[Line]:
        return [Line(number, text) for number, text in enumerate(self.host.get_lines())]

    def line_at(self, line_number: int) -> Line | None:
        raw = self.host.get_lines()
        if not 0 <= line_number < len(raw):
            return None
        return Line(line_number, raw[line_number])

    def classify_at(self, line_number: int) -> ParsedLine | None:
        line = self.line_at(line_number)
        if line is None:
            return None
        return classify(line.raw_text, self._grammar)

    @property
    def text(self) -> str:
        return "\n".join(self.host.get_lines())

    # --- Shape ---

    def is_supported(self) -> bool:
        """True if the active buffer is a recognized todo file.

        Files are recognized by name or extension; unsaved buffers by
        holding at least one todo or project line.
        """
        path = self.path
        if path is not None:
            file_config = self.config.file
            if path.name in file_config.names or path.suffix in file_config.extensions:
                return True
            logger.debug("Unsupported document: %s", path)
            return False
        return self.is_valid()

    def require_supported(self) -> None:
        """Raise UnsupportedDocumentError unless the buffer is a todo file."""
        if not self.is_supported():
            raise UnsupportedDocumentError(f"Not a todo file: {self.path or '<unsaved buffer>'}")

    def is_valid(self) -> bool:
        """True unless the document is only comments and blank lines."""
        for text in self.host.get_lines():
            kind = classify(text, self._grammar).kind
            if kind in (LineKind.TODO, LineKind.PROJECT):
                return True
        return False

    # --- Entities ---

    def get_entity_at(self, line_number: int, validate: bool = False) -> Todo | Project | None:
        """The todo or project on a line, or None.

        With ``validate`` the document itself must also be in a supported
        shape (not a pure comment file).
        """
        if validate and not self.is_valid():
            return None
        line = self.line_at(line_number)
        if line is None:
            return None
        parsed = classify(line.raw_text, self._grammar)
        if parsed.kind == LineKind.TODO:
            return Todo(line.line_number, line.raw_text, self.config)
        if parsed.kind == LineKind.PROJECT:
            return parse_project(line, self.config)
        return None

    def get_todo_at(self, line_number: int, validate: bool = False) -> Todo | None:
        entity = self.get_entity_at(line_number, validate)
        return entity if isinstance(entity, Todo) else None

    def get_project_at(self, line_number: int) -> Project | None:
        entity = self.get_entity_at(line_number)
        return entity if isinstance(entity, Project) else None

    def get_todos(self) -> list[Todo]:
        return [todo for line in self.get_lines() if (todo := Todo.from_line(line, self.config))]

    def get_projects(self) -> list[Project]:
        return [p for line in self.get_lines() if (p := parse_project(line, self.config))]

    def get_parent_projects(self, line_number: int) -> list[Project]:
        """Projects enclosing a line, outermost first.

        A project encloses a line when it sits above it with a smaller
        indentation level and no shallower project intervenes.
        """
        lines = self.get_lines()
        if not 0 <= line_number < len(lines):
            return []
        parsed = classify(lines[line_number].raw_text, self._grammar)
        level = indent_level(parsed.indent, self.config.indentation)
        parents: list[Project] = []
        for line in reversed(lines[:line_number]):
            if level == 0:
                break
            project = parse_project(line, self.config)
            if project is not None and project.indent_level < level:
                parents.append(project)
                level = project.indent_level
        return list(reversed(parents))
