"""
Async HTTP client used by the flight providers to call their upstream
offer services with JSON payloads.
"""

from typing import Any, Dict, Optional
import httpx
import logging

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """
    Thin wrapper around httpx.AsyncClient that speaks JSON.

    One instance is built per search request and shared by both providers;
    the caller owns it and must close it.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.timeout = timeout

        # Configure httpx client
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
            limits=httpx.Limits(max_keepalive_connections=20, max_connections=100)
        )

    def _get_headers(self) -> Dict[str, str]:
        """Get JSON request headers"""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """
        Make an HTTP request with JSON headers.

        Status codes are not checked here; classifying them is up to the caller.
        Transport errors (httpx.HTTPError) propagate unchanged.
        """
        logger.debug(f"Making {method} request to {url}")

        response = await self.client.request(method, url, headers=self._get_headers(), **kwargs)

        logger.debug(f"{method} request to {url} returned {response.status_code}")
        return response

    async def post_json(self, url: str, payload: Dict[str, Any]) -> httpx.Response:
        """Make async POST request with a JSON body"""
        return await self.request("POST", url, json=payload)

    async def close(self) -> None:
        """Close the HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
