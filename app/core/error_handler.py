"""
Centralized error handling for the Flight Search Gateway.

This module maps the flight search exception hierarchy onto error codes and
HTTP statuses, renders the {"error": {"status", "message"}} envelope, and logs
failures with structured context.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from enum import Enum

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    AggregateFailure,
    DownstreamUnavailable,
    FlightSearchError,
    SearchValidationError,
    UnrecognizedStatus,
)
from app.models.responses import ErrorDetail, ErrorResponse


class ErrorCode(str, Enum):
    """Enumeration of error codes for different failure scenarios."""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Upstream provider errors, never shown to callers
    DOWNSTREAM_UNAVAILABLE = "DOWNSTREAM_UNAVAILABLE"
    UNRECOGNIZED_STATUS = "UNRECOGNIZED_STATUS"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_UNREACHABLE = "UPSTREAM_UNREACHABLE"
    UPSTREAM_INVALID_RESPONSE = "UPSTREAM_INVALID_RESPONSE"

    # Server errors (5xx)
    AGGREGATE_FAILURE = "AGGREGATE_FAILURE"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorHandler:
    """
    Centralized error handling class with consistent error response formatting.

    Provider failures are only logged here; the caller sees either a
    validation message or the generic internal server error.
    """

    # Error code to HTTP status code mapping
    ERROR_STATUS_MAPPING: Dict[ErrorCode, int] = {
        ErrorCode.VALIDATION_ERROR: 400,

        ErrorCode.DOWNSTREAM_UNAVAILABLE: 500,
        ErrorCode.UNRECOGNIZED_STATUS: 500,
        ErrorCode.UPSTREAM_TIMEOUT: 500,
        ErrorCode.UPSTREAM_UNREACHABLE: 500,
        ErrorCode.UPSTREAM_INVALID_RESPONSE: 500,

        ErrorCode.AGGREGATE_FAILURE: 500,
        ErrorCode.INTERNAL_SERVER_ERROR: 500,
    }

    # Error code to default message mapping
    ERROR_MESSAGES: Dict[ErrorCode, str] = {
        ErrorCode.VALIDATION_ERROR: "Invalid request body",
        ErrorCode.DOWNSTREAM_UNAVAILABLE: "Upstream provider unavailable",
        ErrorCode.UNRECOGNIZED_STATUS: "Upstream provider returned an unexpected status",
        ErrorCode.UPSTREAM_TIMEOUT: "Upstream provider timed out",
        ErrorCode.UPSTREAM_UNREACHABLE: "Unable to reach upstream provider",
        ErrorCode.UPSTREAM_INVALID_RESPONSE: "Upstream provider returned an invalid response",
        ErrorCode.AGGREGATE_FAILURE: "Internal server error",
        ErrorCode.INTERNAL_SERVER_ERROR: "Internal server error",
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the ErrorHandler.

        Args:
            logger: Optional logger instance. If not provided, creates a new logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def create_error_response(status_code: int, message: str) -> ErrorResponse:
        """Build the error envelope for a status and message."""
        return ErrorResponse(error=ErrorDetail(status=status_code, message=message))

    def create_json_response(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None
    ) -> JSONResponse:
        """
        Create a JSON response for an error.

        Args:
            error_code: The error code enum value
            message: Optional custom error message. If not provided, uses default message.

        Returns:
            JSONResponse: FastAPI JSON response with appropriate status code
        """
        status_code = self.ERROR_STATUS_MAPPING.get(error_code, 500)
        final_message = message or self.ERROR_MESSAGES.get(error_code, "Internal server error")
        error_response = self.create_error_response(status_code, final_message)

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode='json')
        )

    def log_error(
        self,
        error_code: ErrorCode,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[BaseException] = None,
        additional_context: Optional[Dict[str, Any]] = None,
        level: int = logging.ERROR
    ) -> None:
        """
        Log error with context information.

        Args:
            error_code: The error code enum value
            message: Error message
            request: Optional FastAPI request object
            exception: Optional exception that caused the error
            additional_context: Optional additional context information
            level: Logging level, ERROR unless the failure is recoverable
        """
        context = {
            "error_code": error_code.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if request:
            context.update({
                "method": request.method,
                "url": str(request.url),
                "client_ip": getattr(request.client, 'host', 'unknown') if request.client else 'unknown',
            })

        if additional_context:
            context.update(additional_context)

        self.logger.log(
            level,
            f"{error_code.value}: {message}",
            extra={"context": context},
            exc_info=exception if exception is not None and level >= logging.ERROR else None
        )

    @staticmethod
    def classify_provider_error(error: BaseException) -> ErrorCode:
        """Map a provider failure onto an error code."""
        if isinstance(error, DownstreamUnavailable):
            return ErrorCode.DOWNSTREAM_UNAVAILABLE
        if isinstance(error, UnrecognizedStatus):
            return ErrorCode.UNRECOGNIZED_STATUS
        if isinstance(error, (asyncio.TimeoutError, httpx.TimeoutException)):
            return ErrorCode.UPSTREAM_TIMEOUT
        if isinstance(error, httpx.HTTPError):
            return ErrorCode.UPSTREAM_UNREACHABLE
        if isinstance(error, ValueError):
            return ErrorCode.UPSTREAM_INVALID_RESPONSE
        return ErrorCode.INTERNAL_SERVER_ERROR

    def log_provider_failure(self, provider: str, error: BaseException) -> ErrorCode:
        """
        Log a single provider failure as a warning.

        The search carries on with the remaining providers, so this is not
        treated as an error on its own.
        """
        error_code = self.classify_provider_error(error)
        self.log_error(
            error_code=error_code,
            message=f"GetFlights request error: {type(error).__name__}: {error} [provider = {provider}]",
            exception=error,
            additional_context={"provider": provider},
            level=logging.WARNING
        )
        return error_code

    def handle_search_error(
        self,
        error: FlightSearchError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Turn a flight search error into the client-visible response.

        Validation errors surface their message; everything else is reported
        as a generic internal server error with causes kept in the logs.
        """
        if isinstance(error, SearchValidationError):
            self.log_error(
                error_code=ErrorCode.VALIDATION_ERROR,
                message=error.message,
                request=request,
                additional_context={"field": error.field},
                level=logging.INFO
            )
            return self.create_json_response(ErrorCode.VALIDATION_ERROR, error.message)

        if isinstance(error, AggregateFailure):
            self.log_error(
                error_code=ErrorCode.AGGREGATE_FAILURE,
                message=str(error),
                request=request,
                additional_context={
                    "failed_providers": sorted(error.failures),
                }
            )
            return self.create_json_response(ErrorCode.AGGREGATE_FAILURE)

        self.log_error(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR,
            message=str(error),
            request=request,
            exception=error
        )
        return self.create_json_response(ErrorCode.INTERNAL_SERVER_ERROR)


# Global error handler instance
error_handler = ErrorHandler()
