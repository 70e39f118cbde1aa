"""Request models for the Flight Search Gateway."""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from app.core.exceptions import SearchValidationError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
MAX_AIRPORT_CODE_LENGTH = 3


class SearchCriteria(BaseModel):
    """Validated search parameters, ready to be sent upstream."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    departure_date: date

    @property
    def departure_date_str(self) -> str:
        return self.departure_date.strftime(DATE_FORMAT)


class SearchFlightsRequest(BaseModel):
    """Request body for the flight search endpoint."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "origin": "LHR",
                "destination": "JFK",
                "departure_date": "2019-10-21"
            }
        }
    )

    origin: str = ""
    destination: str = ""
    departure_date: str = ""

    def to_criteria(self) -> SearchCriteria:
        """
        Validate the raw body and build the search criteria.

        The date is checked first, then origin, then destination; the first
        failure wins.

        Raises:
            SearchValidationError: naming the offending field
        """
        invalid_date = SearchValidationError(
            "departure_date",
            "Invalid departure date, must be of format YYYY-MM-DD"
        )
        # strptime alone accepts single-digit months and days
        if not DATE_PATTERN.fullmatch(self.departure_date):
            raise invalid_date
        try:
            departure_date = datetime.strptime(self.departure_date, DATE_FORMAT).date()
        except ValueError:
            raise invalid_date

        if len(self.origin) > MAX_AIRPORT_CODE_LENGTH:
            raise SearchValidationError("origin", "Invalid airport code for origin")
        if len(self.destination) > MAX_AIRPORT_CODE_LENGTH:
            raise SearchValidationError("destination", "Invalid airport code for destination")

        return SearchCriteria(
            origin=self.origin,
            destination=self.destination,
            departure_date=departure_date
        )
