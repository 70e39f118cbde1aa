"""
Flight aggregator: queries every provider concurrently, merges the offers of
the providers that succeeded and applies the requested ordering.
"""

import asyncio
import logging
from typing import Dict, Optional, Sequence

from app.core.error_handler import ErrorHandler, error_handler as default_error_handler
from app.core.exceptions import AggregateFailure
from app.models.flights import FlightOfferSet, SortDirective
from app.models.requests import SearchCriteria
from app.services.http_client import AsyncHttpClient
from app.services.providers.airline_a import AirlineAProvider
from app.services.providers.airline_b import AirlineBProvider
from app.services.providers.base import FlightProvider
from app.services.sorting import sort_flights

logger = logging.getLogger(__name__)


class FlightAggregator:
    """
    Fans a search out to all providers and merges their offers.

    Offers are merged in provider order, whatever order the calls finish in.
    A failing provider contributes no offers; the search only fails when no
    offers are left at all.
    """

    def __init__(
        self,
        providers: Sequence[FlightProvider],
        timeout: float = 10.0,
        http_client: Optional[AsyncHttpClient] = None,
        error_handler: Optional[ErrorHandler] = None
    ):
        self.providers = list(providers)
        self.timeout = timeout
        self.http_client = http_client
        self.error_handler = error_handler or default_error_handler

    @classmethod
    def from_settings(cls, settings) -> "FlightAggregator":
        """Build an aggregator, its providers and their shared HTTP client."""
        upstream = settings.get_upstream_config()
        http_client = AsyncHttpClient(timeout=upstream['timeout'])
        providers = [
            AirlineAProvider(http_client, base_url=upstream['airline_a_base_url']),
            AirlineBProvider(http_client, base_url=upstream['airline_b_base_url']),
        ]
        return cls(providers, timeout=upstream['timeout'], http_client=http_client)

    async def _fetch(self, provider: FlightProvider, criteria: SearchCriteria) -> FlightOfferSet:
        return await asyncio.wait_for(
            provider.get_flights(
                criteria.origin,
                criteria.destination,
                criteria.departure_date_str
            ),
            timeout=self.timeout
        )

    async def search(
        self,
        criteria: SearchCriteria,
        directive: Optional[SortDirective] = None
    ) -> FlightOfferSet:
        """
        Search all providers and return the merged, optionally sorted offers.

        Args:
            criteria: Validated search criteria
            directive: Optional ordering requested by the caller

        Returns:
            Offers of every successful provider, in provider order unless sorted

        Raises:
            AggregateFailure: when no provider returned any offers
        """
        logger.info(
            f"Searching {len(self.providers)} providers for "
            f"{criteria.origin}->{criteria.destination} on {criteria.departure_date_str}"
        )

        results = await asyncio.gather(
            *(self._fetch(provider, criteria) for provider in self.providers),
            return_exceptions=True
        )

        flights: FlightOfferSet = []
        failures: Dict[str, BaseException] = {}
        for provider, result in zip(self.providers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    # Cancellation and interpreter exits are not provider failures.
                    raise result
                self.error_handler.log_provider_failure(provider.name, result)
                failures[provider.name] = result
                continue
            flights.extend(result)

        if not flights:
            raise AggregateFailure(failures)

        logger.info(f"Merged {len(flights)} offers from {len(self.providers) - len(failures)} providers")
        return sort_flights(flights, directive)

    async def close(self) -> None:
        """Close the shared HTTP client, if this aggregator owns one."""
        if self.http_client is not None:
            await self.http_client.close()
