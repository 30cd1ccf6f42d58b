"""Export command writing a todo file as HTML."""

import sys
from pathlib import Path

from ..host import FileHost
from ..models import TodoPlusConfig
from ..services import CommandService
from .output import error, success


def run_export(path: Path, output: Path | None, config: TodoPlusConfig) -> int:
    """
    Render a todo file to HTML.

    Args:
        path: The todo file
        output: Destination file; stdout when None
        config: Loaded configuration

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if not path.is_file():
        error(f"File not found: {path}")
        return 1
    host = FileHost(path, buffer_path=output)
    content = CommandService(host, config).export_html()
    if output is None:
        sys.stdout.write(content)
    else:
        success(f"Exported {path} to {output}")
    return 0
