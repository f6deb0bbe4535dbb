"""HTTP gateway to the remote index service.

Talks to the JSON web service of the search server:

    GET  {base_url}/indexes/{index}/json/samples?count=1
    POST {base_url}/indexes/{index}/json?fieldTypes=true
"""

from __future__ import annotations

import json
import math
import time
from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from ..core.config import GatewayConfig
from ..core.exceptions import GatewayError
from .base import IndexGateway


class HTTPIndexGateway(IndexGateway):
    """Index gateway backed by ``httpx.AsyncClient``.

    Example:
        async with HTTPIndexGateway(config.gateway) as gateway:
            sample = await gateway.fetch_sample("products")
            response = await gateway.ingest("products", sample)
            print(response["count"])
    """

    def __init__(self, config: GatewayConfig, client: httpx.AsyncClient | None = None):
        """Initialize HTTP gateway.

        Args:
            config: GatewayConfig with connection details.
            client: Optional pre-built client, closed by the caller.
        """
        self.config = config
        self._client = client
        self._owns_client = client is None
        logger.debug(f"Index gateway initialized: base_url={config.base_url}")

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def _index_url(self, index: str, suffix: str) -> str:
        return f"{self.base_url}/indexes/{quote(index, safe='')}/{suffix}"

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client if this gateway created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_sample(self, index: str, count: int = 1) -> Any:
        url = self._index_url(index, "json/samples")
        return await self._request("GET", url, params={"count": count})

    async def ingest(self, index: str, payload: Any, field_types: bool = True) -> Any:
        url = self._index_url(index, "json")
        return await self._request(
            "POST",
            url,
            params={"fieldTypes": "true" if field_types else "false"},
            body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
        )

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
    ) -> Any:
        """Issue a request and decode its JSON body.

        Raises:
            GatewayError: On transport failure, non-success status or a body
                that is not JSON.
        """
        client = self._get_client()
        logger.debug(f"{method} {url} params={params}")
        start_time = time.perf_counter()

        try:
            if body is None:
                response = await client.request(method, url, params=params)
            else:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException:
            logger.warning(f"Timeout for {method} {url}")
            raise GatewayError(url, "Request timed out", retryable=True)
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise GatewayError(url, str(e) or type(e).__name__, retryable=True)

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.debug(f"{method} {url} -> {response.status_code} in {elapsed:.1f}ms")

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise GatewayError(
                url,
                message,
                status_code=response.status_code,
                retryable=response.status_code >= 500,
            )

        try:
            return response.json(
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except ValueError as e:
            raise GatewayError(
                url,
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
            )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid constant {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range {text}")
    return value


def _error_message(response: httpx.Response) -> str:
    """Extract a human-readable message from an error response."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("message", "error", "reason"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    if text and data is None:
        return text

    return f"HTTP {response.status_code}: {response.reason_phrase}"
