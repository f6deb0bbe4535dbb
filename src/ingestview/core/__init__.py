"""Core configuration, errors and types for ingestview."""

from .config import Config, GatewayConfig, WorkflowConfig
from .exceptions import (
    NO_INDEX_MESSAGE,
    NOTHING_TO_INDEX_MESSAGE,
    GatewayError,
    IndexNotSelectedError,
    IngestViewError,
    ParseError,
)
from .types import IngestOutcome, StatusView, WorkflowPhase, WorkflowState

__all__ = [
    "Config",
    "GatewayConfig",
    "WorkflowConfig",
    "NO_INDEX_MESSAGE",
    "NOTHING_TO_INDEX_MESSAGE",
    "IngestViewError",
    "IndexNotSelectedError",
    "ParseError",
    "GatewayError",
    "WorkflowPhase",
    "WorkflowState",
    "StatusView",
    "IngestOutcome",
]
