"""Abstract base class for remote index gateways."""

from abc import ABC, abstractmethod
from typing import Any


class IndexGateway(ABC):
    """Remote service that stores and ingests index documents."""

    @abstractmethod
    async def fetch_sample(self, index: str, count: int = 1) -> Any:
        """Fetch representative documents from an index.

        Args:
            index: Name of the index to sample.
            count: Number of documents requested.

        Returns:
            The decoded JSON value returned by the service.

        Raises:
            GatewayError: If the request fails.
        """
        pass

    @abstractmethod
    async def ingest(self, index: str, payload: Any, field_types: bool = True) -> Any:
        """Submit a document payload for indexing.

        Args:
            index: Name of the target index.
            payload: Parsed JSON value to ingest.
            field_types: Ask the service to infer field types.

        Returns:
            The decoded JSON response, which carries a record ``count``.

        Raises:
            GatewayError: If the request fails.
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the gateway."""
        pass

    async def __aenter__(self) -> "IndexGateway":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
