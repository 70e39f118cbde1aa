"""
Exception hierarchy for the flight search path.

Every failure the search path can produce is one of the classes below, so the
router and the aggregator branch on types rather than on message contents.
"""

from typing import Dict, Optional


class FlightSearchError(Exception):
    """Base class for all flight search errors."""


class SearchValidationError(FlightSearchError):
    """Raised when inbound search parameters are malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ProviderError(FlightSearchError):
    """Raised when an upstream provider declares a failure."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"[{provider}] {message}")
        self.provider = provider


class DownstreamUnavailable(ProviderError):
    """Upstream answered with a 5xx status."""

    def __init__(self, provider: str, status_code: int, body: str = ""):
        super().__init__(provider, f"downstream unavailable ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class UnrecognizedStatus(ProviderError):
    """Upstream answered with a status that is neither 200 nor 5xx."""

    def __init__(self, provider: str, status_code: int):
        super().__init__(provider, f"unexpected response code: {status_code}")
        self.status_code = status_code


class AggregateFailure(FlightSearchError):
    """Raised when a search yields zero offers across all providers."""

    def __init__(self, failures: Optional[Dict[str, BaseException]] = None):
        self.failures = failures or {}
        if self.failures:
            causes = "; ".join(
                f"{provider}: {type(error).__name__}: {error}"
                for provider, error in self.failures.items()
            )
            message = f"No flight offers available ({causes})"
        else:
            message = "No flight offers available"
        super().__init__(message)
