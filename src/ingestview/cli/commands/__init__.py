"""Command implementations for ingestview CLI."""

from .ingest import add_index_arguments, handle_index, handle_sample
from .status import handle_status

__all__ = [
    "add_index_arguments",
    "handle_sample",
    "handle_index",
    "handle_status",
]
