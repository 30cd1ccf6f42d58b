"""Line-level records produced by the parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .enums import LineKind, TagKind, TodoStatus

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class Line:
    """One line of source text, read fresh from the document."""

    line_number: int  # 0-based
    raw_text: str


@dataclass(frozen=True)
class TagSpan:
    """A tag found on a line.

    ``start``/``end`` are offsets into the raw line; ``start`` points at
    the tag symbol and ``end`` is one past the closing paren (or the last
    character of a bare tag).
    """

    kind: TagKind
    name: str  # "done", "lasted", "est", "high", ...
    start: int
    end: int
    value: str | None = None  # payload inside the parens, or the bare estimate

    def raw(self, text: str) -> str:
        """The tag exactly as written in ``text``."""
        return text[self.start : self.end]


@dataclass(frozen=True)
class ParsedLine:
    """Classification of a single raw line.

    Only TODO lines carry a status, a symbol and tag spans.
    """

    kind: LineKind
    raw_text: str
    indent: str = ""
    status: TodoStatus | None = None
    symbol: str | None = None
    body_start: int = 0  # offset of the first character after "<symbol> "
    tags: tuple[TagSpan, ...] = field(default_factory=tuple)

    @property
    def is_todo(self) -> bool:
        return self.kind == LineKind.TODO

    @property
    def body(self) -> str:
        """Everything after the symbol and its separator."""
        return self.raw_text[self.body_start :]

    @property
    def text(self) -> str:
        """Human-readable description with tag spans cut out."""
        parts: list[str] = []
        cursor = self.body_start
        for tag in self.tags:
            parts.append(self.raw_text[cursor : tag.start])
            cursor = tag.end
        parts.append(self.raw_text[cursor:])
        return _WHITESPACE_RUN.sub(" ", "".join(parts)).strip()

    def get_tag(self, kind: TagKind) -> TagSpan | None:
        """Return the tag of the given kind, if present."""
        for tag in self.tags:
            if tag.kind == kind:
                return tag
        return None


@dataclass(frozen=True)
class Project:
    """A project header line such as ``Work:``."""

    line_number: int
    raw_text: str
    name: str
    indent: str = ""
    indent_level: int = 0
