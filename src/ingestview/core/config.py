"""Configuration management for ingestview."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class GatewayConfig:
    """Remote index service configuration."""

    base_url: str = "http://localhost:9090/ws"
    timeout: float = 30.0
    # Number of documents requested by the sample action
    sample_count: int = 1
    # Ask the service to infer field types on ingestion
    field_types: bool = True
    user_agent: str = "ingestview/1.0"


@dataclass
class WorkflowConfig:
    """Ingestion workflow behaviour."""

    # Ignore responses from actions superseded by a newer one
    drop_stale_responses: bool = True


@dataclass
class Config:
    """Main application configuration."""

    default_index: str | None = None
    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_dict(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: str | Path | None = None) -> "Config":
        """Load from an explicit path, INGESTVIEW_CONFIG, or the environment only."""
        path = path or os.environ.get("INGESTVIEW_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_dict(self, data: dict[str, Any]) -> None:
        if "default_index" in data:
            self.default_index = data["default_index"] or None

        for key, value in data.get("gateway", {}).items():
            if hasattr(self.gateway, key):
                setattr(self.gateway, key, value)

        for key, value in data.get("workflow", {}).items():
            if hasattr(self.workflow, key):
                setattr(self.workflow, key, value)

    def _apply_env(self) -> None:
        if url := os.environ.get("INGESTVIEW_URL"):
            self.gateway.base_url = url

        if timeout := os.environ.get("INGESTVIEW_TIMEOUT"):
            self.gateway.timeout = float(timeout)

        if index := os.environ.get("INGESTVIEW_INDEX"):
            self.default_index = index
