"""
Test fixtures with sample upstream payloads and domain offers.
Provides realistic test data for provider, aggregator and endpoint tests.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from app.models.flights import FlightOffer


FIXED_TIME = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def make_offer(
    duration_minutes: int,
    total_amount: float,
    flight_number: str = "123",
    currency: str = "GBP",
    origin: str = "LHR",
    destination: str = "JFK"
) -> FlightOffer:
    """Build a FlightOffer with fixed timestamps."""
    return FlightOffer(
        arrival_time=FIXED_TIME,
        departure_time=FIXED_TIME,
        duration_minutes=duration_minutes,
        total_amount=total_amount,
        currency=currency,
        flight_number=flight_number,
        origin=origin,
        destination=destination
    )


class OfferFixtures:
    """Domain offers as returned by the two providers."""

    @staticmethod
    def flights_a() -> List[FlightOffer]:
        return [
            make_offer(duration_minutes=1, total_amount=20.00, flight_number="A0"),
            make_offer(duration_minutes=3, total_amount=10.00, flight_number="A1"),
        ]

    @staticmethod
    def flights_b() -> List[FlightOffer]:
        return [
            make_offer(duration_minutes=2, total_amount=40.00, flight_number="B0"),
            make_offer(duration_minutes=4, total_amount=30.00, flight_number="B1"),
        ]


class UpstreamPayloadFixtures:
    """Raw upstream bodies in each provider's wire schema."""

    @staticmethod
    def airline_a() -> Dict[str, Any]:
        return {
            "data": {
                "offers": [
                    {
                        "arrival": "2019-10-21T18:25:00Z",
                        "departure": "2019-10-21T10:05:00Z",
                        "destination": "JFK",
                        "duration": 500,
                        "flight_number": "BA117",
                        "id": "off_0001",
                        "origin": "LHR",
                        "total_amount": 41237,
                        "total_currency": "GBP"
                    },
                    {
                        "arrival": "2019-10-21T22:00:00Z",
                        "departure": "2019-10-21T14:30:00Z",
                        "destination": "JFK",
                        "duration": 450,
                        "flight_number": "BA175",
                        "id": "off_0002",
                        "origin": "LHR",
                        "total_amount": 29999,
                        "total_currency": "GBP"
                    },
                    {
                        "arrival": "2019-10-22T06:15:00Z",
                        "departure": "2019-10-21T21:45:00Z",
                        "destination": "JFK",
                        "duration": 510,
                        "flight_number": "AA101",
                        "id": "off_0003",
                        "origin": "LHR",
                        "total_amount": 50000,
                        "total_currency": "GBP"
                    }
                ]
            }
        }

    @staticmethod
    def airline_b() -> Dict[str, Any]:
        return {
            "flights": [
                {
                    "arrival": "2019-10-21T19:40:00Z",
                    "currency": "GBP",
                    "departure": "2019-10-21T11:10:00Z",
                    "dest": "JFK",
                    "flight_number": "VS3",
                    "id": "fl_0001",
                    "origin": "LHR",
                    "price": {"amount": 389.5}
                },
                {
                    "arrival": "2019-10-21T16:29:59Z",
                    "currency": "GBP",
                    "departure": "2019-10-21T08:00:00Z",
                    "dest": "JFK",
                    "flight_number": "DL4",
                    "id": "fl_0002",
                    "origin": "LHR",
                    "price": {"amount": 420.0}
                }
            ]
        }


SEARCH_BODY = {
    "origin": "LHR",
    "destination": "JFK",
    "departure_date": "2019-10-21"
}
