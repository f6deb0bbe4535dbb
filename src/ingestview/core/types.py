"""Type definitions for ingestview."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class WorkflowPhase(Enum):
    """Phase of the ingestion workflow."""

    IDLE = "idle"
    BUSY = "busy"


@dataclass(frozen=True)
class StatusView:
    """What the status strip displays."""

    task: str | None
    error: str | None
    busy: bool


@dataclass(frozen=True)
class WorkflowState:
    """Transient state of the ingestion workflow.

    Attributes:
        phase: IDLE at rest, BUSY while an action is in progress.
        task: Progress or result label.
        error: Message of the last failure.
        ingest_result: Pretty-printed response of the last ingestion.
    """

    phase: WorkflowPhase = WorkflowPhase.IDLE
    task: str | None = None
    error: str | None = None
    ingest_result: str | None = None

    @property
    def busy(self) -> bool:
        return self.phase is WorkflowPhase.BUSY

    @property
    def status(self) -> StatusView:
        """Project the state onto the status strip."""
        return StatusView(task=self.task, error=self.error, busy=self.busy)

    def evolve(self, **changes: Any) -> "WorkflowState":
        return replace(self, **changes)


@dataclass(frozen=True)
class IngestOutcome:
    """Interpreted response of an ingestion request."""

    count: int
    response: Any

    @property
    def label(self) -> str:
        if self.count == 0:
            return "Nothing has been indexed."
        if self.count == 1:
            return "One record has been indexed."
        return f"{self.count} records have been indexed."
