"""Domain models shared by the flight providers, the aggregator and the router."""

from datetime import datetime
from enum import Enum
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlightOffer(BaseModel):
    """One priced flight option, normalized from an upstream provider."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "arrival_time": "2019-10-21T18:25:00Z",
                "departure_time": "2019-10-21T10:05:00Z",
                "duration_minutes": 500,
                "total_amount": 412.37,
                "currency": "GBP",
                "flight_number": "BA117",
                "origin": "LHR",
                "destination": "JFK"
            }
        }
    )

    arrival_time: datetime = Field(..., description="Arrival timestamp in ISO format")
    departure_time: datetime = Field(..., description="Departure timestamp in ISO format")
    duration_minutes: int = Field(..., description="Total flight time in minutes", ge=0)
    total_amount: float = Field(..., description="Total price in major currency units")
    currency: str = Field(..., description="ISO currency code")
    flight_number: str = Field(..., description="Marketing flight number")
    origin: str = Field(..., description="Origin airport code")
    destination: str = Field(..., description="Destination airport code")


FlightOfferSet = List[FlightOffer]


class SortKey(str, Enum):
    """Keys offers can be ordered by."""
    PRICE = "price"
    DURATION = "duration"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortKey"]:
        try:
            return cls(value)
        except ValueError:
            return None


class SortOrder(str, Enum):
    """Recognized sort directions."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortOrder"]:
        try:
            return cls(value)
        except ValueError:
            return None


class SortDirective(NamedTuple):
    """Caller-requested ordering, kept as the raw query values."""

    sort_by: Optional[str] = None
    order: Optional[str] = None

    @property
    def key(self) -> Optional[SortKey]:
        return SortKey.parse(self.sort_by)

    @property
    def direction(self) -> Optional[SortOrder]:
        return SortOrder.parse(self.order)
