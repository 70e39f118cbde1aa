"""Airline B: offers under a top-level flights key, no explicit duration."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from app.models.flights import FlightOffer, FlightOfferSet
from app.services.http_client import AsyncHttpClient
from app.services.providers.base import FlightProvider

DEFAULT_BASE_URL = "http://interview.duffel.com/airline_b"


class _Price(BaseModel):
    amount: float


class _FlightB(BaseModel):
    arrival: datetime
    currency: str
    departure: datetime
    dest: str
    flight_number: str
    id: str = ""
    origin: str
    price: _Price

    @property
    def duration_minutes(self) -> int:
        # Whole minutes, truncated toward zero
        return int((self.arrival - self.departure).total_seconds() / 60)

    def to_domain(self) -> FlightOffer:
        return FlightOffer(
            arrival_time=self.arrival,
            departure_time=self.departure,
            duration_minutes=self.duration_minutes,
            total_amount=self.price.amount,
            currency=self.currency,
            flight_number=self.flight_number,
            origin=self.origin,
            destination=self.dest
        )


class _ResponseB(BaseModel):
    flights: Optional[List[_FlightB]] = None


class AirlineBProvider(FlightProvider):
    """Client for the airline B offers service."""

    name = "airline_b"

    def __init__(self, http_client: AsyncHttpClient, base_url: str = DEFAULT_BASE_URL):
        super().__init__(base_url, http_client)

    def _parse_response(self, data: Any) -> FlightOfferSet:
        body = _ResponseB.model_validate(data)
        return [flight.to_domain() for flight in body.flights or []]
