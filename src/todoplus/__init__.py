"""Todo file parsing, state toggling and HTML export."""

from .document import Document
from .todo import Todo

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Todo",
    "__version__",
]
