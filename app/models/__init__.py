# Pydantic models for request/response validation

from .flights import FlightOffer, FlightOfferSet, SortDirective, SortKey, SortOrder
from .requests import SearchCriteria, SearchFlightsRequest
from .responses import ErrorDetail, ErrorResponse

__all__ = [
    "FlightOffer",
    "FlightOfferSet",
    "SortDirective",
    "SortKey",
    "SortOrder",
    "SearchCriteria",
    "SearchFlightsRequest",
    "ErrorDetail",
    "ErrorResponse"
]
