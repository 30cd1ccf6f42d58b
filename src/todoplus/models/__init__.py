"""Data models."""

from .edit import CaretSuggestion, Edit, EditBatch, Position, Selection
from .enums import LineKind, Severity, TagKind, TodoState, TodoStatus
from .line import Line, ParsedLine, Project, TagSpan
from .notification import Notification
from .todoplus_config import (
    ArchiveConfig,
    ColorsConfig,
    FileConfig,
    SymbolsConfig,
    TagsConfig,
    TimekeepingConfig,
    TodoPlusConfig,
)

__all__ = [
    "ArchiveConfig",
    "CaretSuggestion",
    "ColorsConfig",
    "Edit",
    "EditBatch",
    "FileConfig",
    "Line",
    "LineKind",
    "Notification",
    "ParsedLine",
    "Position",
    "Project",
    "Selection",
    "Severity",
    "SymbolsConfig",
    "TagKind",
    "TagSpan",
    "TagsConfig",
    "TimekeepingConfig",
    "TodoPlusConfig",
    "TodoState",
    "TodoStatus",
]
