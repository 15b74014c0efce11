"""Command implementations for migrun CLI."""

from .run import handle_run
from .status import handle_list, handle_status

__all__ = [
    "handle_list",
    "handle_run",
    "handle_status",
]
