"""Airline A: offers nested under data.offers, prices in minor units."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from app.models.flights import FlightOffer, FlightOfferSet
from app.services.http_client import AsyncHttpClient
from app.services.providers.base import FlightProvider

DEFAULT_BASE_URL = "http://interview.duffel.com/airline_a"


class _OfferA(BaseModel):
    arrival: datetime
    departure: datetime
    destination: str
    duration: int
    flight_number: str
    id: str = ""
    origin: str
    total_amount: float
    total_currency: str

    def to_domain(self) -> FlightOffer:
        return FlightOffer(
            arrival_time=self.arrival,
            departure_time=self.departure,
            duration_minutes=self.duration,
            total_amount=self.total_amount / 100.0,
            currency=self.total_currency,
            flight_number=self.flight_number,
            origin=self.origin,
            destination=self.destination
        )


class _DataA(BaseModel):
    offers: Optional[List[_OfferA]] = None


class _ResponseA(BaseModel):
    data: Optional[_DataA] = None


class AirlineAProvider(FlightProvider):
    """Client for the airline A offers service."""

    name = "airline_a"

    def __init__(self, http_client: AsyncHttpClient, base_url: str = DEFAULT_BASE_URL):
        super().__init__(base_url, http_client)

    def _parse_response(self, data: Any) -> FlightOfferSet:
        body = _ResponseA.model_validate(data)
        if body.data is None or not body.data.offers:
            return []
        return [offer.to_domain() for offer in body.data.offers]
