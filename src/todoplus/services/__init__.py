"""Service layer for commands, editing and export."""

from .archive_service import ArchiveService
from .command_service import (
    TOGGLE_BOX,
    TOGGLE_CANCELLED,
    TOGGLE_DONE,
    TOGGLE_START,
    CommandService,
    TodoCommand,
)
from .config_service import ConfigService
from .edit_service import EditService
from .export_service import ExportService
from .file_service import FileService

__all__ = [
    "TOGGLE_BOX",
    "TOGGLE_CANCELLED",
    "TOGGLE_DONE",
    "TOGGLE_START",
    "ArchiveService",
    "CommandService",
    "ConfigService",
    "EditService",
    "ExportService",
    "FileService",
    "TodoCommand",
]
