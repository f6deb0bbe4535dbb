"""Rendering of the workflow status strip."""

import sys
from typing import TextIO

from ..core.types import StatusView

LABEL = "INGEST"
SPINNER = "..."


def render_status(view: StatusView) -> str:
    """Render the one-line status strip.

    The label is followed by a busy marker while an action is in progress,
    then the error (which takes precedence) or the current task.
    """
    parts = [LABEL]
    if view.busy:
        parts.append(SPINNER)
    if view.error:
        parts.append(f"Error: {view.error}")
    elif view.task:
        parts.append(view.task)
    return " ".join(parts)


class StatusPrinter:
    """Workflow listener that prints the status strip when it changes.

    With ``show_errors=False`` failures are left to the caller, which reports
    them itself.
    """

    def __init__(self, stream: TextIO | None = None, show_errors: bool = True):
        self._stream = stream or sys.stderr
        self._show_errors = show_errors
        self._last: str | None = None

    def __call__(self, view: StatusView) -> None:
        if view.error and not self._show_errors:
            return
        line = render_status(view)
        if line != self._last:
            print(line, file=self._stream)
            self._last = line
