"""Parsing and rendering of the editable document buffer."""

import json
import math
from typing import Any

from loguru import logger

from ..core.exceptions import NOTHING_TO_INDEX_MESSAGE, ParseError
from ..core.types import IngestOutcome

INDENT = 2


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_document(text: str | None) -> Any:
    """Parse the document buffer into a JSON value.

    Args:
        text: Current buffer contents.

    Returns:
        The decoded JSON value.

    Raises:
        ParseError: If the buffer is empty or not well-formed JSON.
    """
    if text is None or text == "":
        raise ParseError(NOTHING_TO_INDEX_MESSAGE)

    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except ValueError as e:
        raise ParseError(str(e)) from e


def render_document(value: Any) -> str:
    """Pretty-print a JSON value, keeping key order."""
    return json.dumps(value, indent=INDENT, ensure_ascii=False, allow_nan=False)


def interpret_ingest_response(response: Any) -> IngestOutcome:
    """Read the record count out of an ingestion response."""
    count = response.get("count") if isinstance(response, dict) else None
    if isinstance(count, bool) or not isinstance(count, int):
        logger.warning(f"Ingestion response has no record count: {response!r}")
        count = 0
    return IngestOutcome(count=count, response=response)
