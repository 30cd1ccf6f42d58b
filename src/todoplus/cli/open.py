"""Open command locating (or creating) the project's todo file."""

from pathlib import Path

from ..host import FileHost
from ..models import TodoPlusConfig
from ..services import CommandService
from .output import notification, success


def run_open(
    project_root: Path,
    config: TodoPlusConfig,
    file_path: Path | None = None,
    line_number: int | None = None,
) -> int:
    """
    Print the location of the todo file, creating it if needed.

    Args:
        project_root: Project root searched for a todo file
        config: Loaded configuration
        file_path: Explicit file to open instead of searching
        line_number: Optional 1-based line

    Returns:
        Exit code (0 = success, 1 = no todo file)
    """
    host = FileHost(root_path=project_root.resolve())
    line = line_number - 1 if line_number else None
    opened = CommandService(host, config).open(file_path, line)
    for note in host.notifications:
        notification(note)
    if opened is None:
        return 1
    suffix = f":{line_number}" if line_number else ""
    success(f"{opened}{suffix}")
    return 0
