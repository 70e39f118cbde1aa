"""
Base class for upstream flight offer providers.

Each provider posts the search payload to its own base address, classifies the
response status and maps its bespoke JSON schema onto FlightOffer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

import httpx

from app.core.exceptions import DownstreamUnavailable, UnrecognizedStatus
from app.models.flights import FlightOfferSet
from app.services.http_client import AsyncHttpClient

logger = logging.getLogger(__name__)


class FlightProvider(ABC):
    """Fetches flight offers for a route and date from one upstream service."""

    name = "provider"

    def __init__(self, base_url: str, http_client: AsyncHttpClient):
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/"

    async def get_flights(
        self,
        origin: str,
        destination: str,
        departure_date: str
    ) -> FlightOfferSet:
        """
        Query the upstream for offers.

        Args:
            origin: Origin airport code, passed through as-is
            destination: Destination airport code, passed through as-is
            departure_date: Departure date as YYYY-MM-DD

        Returns:
            List of normalized offers, in upstream order

        Raises:
            DownstreamUnavailable: upstream answered 5xx
            UnrecognizedStatus: upstream answered anything else but 200
            httpx.HTTPError: transport failure
            ValueError: the body could not be decoded or mapped
        """
        payload = {
            "origin": origin,
            "destination": destination,
            "departure_date": departure_date,
        }

        response = await self.http_client.post_json(self.endpoint, payload)
        self._check_status(response)

        offers = self._parse_response(self._decode(response))
        logger.debug(f"{self.name} returned {len(offers)} offers for {origin}->{destination} on {departure_date}")
        return offers

    def _check_status(self, response: httpx.Response) -> None:
        status_code = response.status_code
        if status_code == 200:
            return
        if 500 <= status_code <= 599:
            raise DownstreamUnavailable(self.name, status_code, response.text)
        raise UnrecognizedStatus(self.name, status_code)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        # An empty 200 body means no offers.
        if not response.content:
            return {}
        return response.json()

    @abstractmethod
    def _parse_response(self, data: Dict[str, Any]) -> FlightOfferSet:
        """Map the decoded upstream body onto domain offers."""
