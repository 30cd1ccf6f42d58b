"""Exception types raised by todoplus."""


class TodoPlusError(Exception):
    """Base class for todoplus errors."""


class UnsupportedDocumentError(TodoPlusError):
    """Raised when a document isn't a recognized todo file."""


class EditConflictError(TodoPlusError):
    """Raised when one batch holds two different edits for the same line."""

    def __init__(self, line_number: int) -> None:
        super().__init__(f"Conflicting edits for line {line_number}")
        self.line_number = line_number


class ConfigError(TodoPlusError):
    """Raised when a configuration file can't be loaded."""
