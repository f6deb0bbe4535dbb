"""Pytest configuration and fixtures."""

import pytest

from ingestview.core.config import Config, GatewayConfig
from ingestview.workflow import IngestionController

from tests.fakes import FakeIndexGateway


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in ("INGESTVIEW_URL", "INGESTVIEW_TIMEOUT", "INGESTVIEW_INDEX", "INGESTVIEW_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    """Provide a configuration pointing at a test service."""
    return Config(gateway=GatewayConfig(base_url="http://oss.test/ws", timeout=5.0))


@pytest.fixture
def gateway() -> FakeIndexGateway:
    """Provide a scripted in-memory gateway."""
    return FakeIndexGateway()


@pytest.fixture
def controller(gateway: FakeIndexGateway, config: Config) -> IngestionController:
    """Provide a controller targeting the 'products' index."""
    return IngestionController(gateway, config, selected_index="products")
