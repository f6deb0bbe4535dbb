"""Document ingestion workflow."""

from .controller import COLLECTING_SAMPLE, PARSING, IngestionController
from .documents import interpret_ingest_response, parse_document, render_document
from .status import StatusPrinter, render_status

__all__ = [
    "IngestionController",
    "COLLECTING_SAMPLE",
    "PARSING",
    "parse_document",
    "render_document",
    "interpret_ingest_response",
    "render_status",
    "StatusPrinter",
]
