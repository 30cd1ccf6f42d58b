"""Enums for line classification, todo status and tag kinds."""

from enum import Enum


class LineKind(str, Enum):
    """Role of a single line in a todo file."""

    BLANK = "blank"
    COMMENT = "comment"
    PROJECT = "project"
    TODO = "todo"


class TodoStatus(str, Enum):
    """Status mark of a todo (the box glyph variant)."""

    OPEN = "open"
    DONE = "done"
    CANCELLED = "cancelled"


class TodoState(str, Enum):
    """Derived state: status mark plus the presence of a started tag."""

    OPEN = "open"
    STARTED = "started"
    DONE = "done"
    CANCELLED = "cancelled"


class TagKind(str, Enum):
    """Kinds of tags tracked on a todo line.

    Declaration order is the lookup priority used when two kinds match
    at the same offset.
    """

    CREATED = "created"
    STARTED = "started"
    FINISHED = "finished"
    ELAPSED = "elapsed"
    ESTIMATE = "estimate"
    PRIORITY = "priority"


class Severity(str, Enum):
    """Severity of a user-visible notification."""

    INFO = "info"
    ERROR = "error"
