"""Test fakes for testing without a running index service.

Example:
    from tests.fakes import FakeIndexGateway

    gateway = FakeIndexGateway(sample={"name": "Widget"})
    controller = IngestionController(gateway, selected_index="products")
"""

from .gateway import FakeIndexGateway, GatedCall

__all__ = ["FakeIndexGateway", "GatedCall"]
