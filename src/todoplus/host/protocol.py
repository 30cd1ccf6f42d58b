"""Host protocol: what todoplus needs from the editor it runs in."""

from pathlib import Path
from typing import Protocol

from ..models import Edit, Selection, Severity


class HostProtocol(Protocol):
    """Interface to the host editor.

    The core reads lines and selections from the host and hands back
    atomic batches of line replacements. Everything else (file opening,
    notifications, new buffers) is fire-and-forget.
    """

    @property
    def path(self) -> Path | None:
        """Path of the active document, or None for an unsaved buffer."""
        ...

    @property
    def root_path(self) -> Path | None:
        """Root of the open project, or None if no project is open."""
        ...

    def get_lines(self) -> list[str]:
        """Current text of the active document, one entry per line."""
        ...

    def get_selections(self) -> list[Selection]:
        """Current selections in the active document."""
        ...

    def set_selections(self, selections: list[Selection]) -> None:
        """Replace the current selections."""
        ...

    def apply_edits(self, edits: list[Edit]) -> bool:
        """Apply line replacements atomically.

        Returns:
            True if every edit was applied, False if the batch was rejected.
        """
        ...

    def replace_lines(self, lines: list[str]) -> bool:
        """Replace the whole document atomically."""
        ...

    def open_file(
        self,
        path: Path,
        focus: bool = True,
        line_number: int | None = None,
        start_col: int | None = None,
        end_col: int | None = None,
    ) -> None:
        """Bring a file location into view."""
        ...

    def make_file(self, path: Path, content: str) -> None:
        """Create a file with default content if it doesn't exist."""
        ...

    def open_buffer(self, content: str, language: str = "html") -> None:
        """Open content in a new untitled buffer."""
        ...

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        """Show a message to the user."""
        ...
