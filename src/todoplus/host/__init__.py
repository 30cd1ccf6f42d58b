"""Host editor boundary."""

from .filesystem import FileHost, OpenedLocation
from .protocol import HostProtocol

__all__ = [
    "FileHost",
    "HostProtocol",
    "OpenedLocation",
]
