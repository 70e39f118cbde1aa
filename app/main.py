"""
Flight Search Gateway - FastAPI Application
"""

import logging
from typing import AsyncIterator, List, Optional
from fastapi import FastAPI, Request, HTTPException, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_global_settings
from app.core.error_handler import ErrorCode, error_handler
from app.core.exceptions import FlightSearchError
from app.models.flights import FlightOffer, SortDirective
from app.models.requests import SearchFlightsRequest
from app.services.flight_aggregator import FlightAggregator

settings = get_global_settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

environment_config = settings.get_environment_config()

# Create FastAPI application instance
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Aggregates and ranks flight offers from multiple airline providers",
    docs_url="/docs" if environment_config['enable_docs'] else None,
    redoc_url="/redoc" if environment_config['enable_docs'] else None
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependency injection for FlightAggregator
async def get_flight_aggregator() -> AsyncIterator[FlightAggregator]:
    """Dependency to provide a FlightAggregator wired to the configured upstreams."""
    aggregator = FlightAggregator.from_settings(settings)
    try:
        yield aggregator
    finally:
        # Ensure the upstream HTTP client is released
        try:
            await aggregator.close()
        except Exception as cleanup_error:
            logger.warning(f"Error during aggregator cleanup: {cleanup_error}")


# Global exception handlers
@app.exception_handler(FlightSearchError)
async def flight_search_exception_handler(request: Request, exc: FlightSearchError):
    """Handle flight search errors with the error envelope."""
    return error_handler.handle_search_error(exc, request)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent error response format."""
    logger.error(f"HTTP Exception: {exc.status_code} - {exc.detail} - URL: {request.url}")

    error_response = error_handler.create_error_response(exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode='json')
    )


@app.exception_handler(StarletteHTTPException)
async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle Starlette HTTP exceptions with consistent error response format."""
    logger.error(f"Starlette HTTP Exception: {exc.status_code} - {exc.detail} - URL: {request.url}")

    error_response = error_handler.create_error_response(exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode='json')
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies as bad requests."""
    logger.error(f"Validation Error: {exc.errors()} - URL: {request.url}")

    return error_handler.create_json_response(ErrorCode.VALIDATION_ERROR)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions with consistent error response format."""
    logger.error(f"Unhandled Exception: {type(exc).__name__}: {str(exc)} - URL: {request.url}", exc_info=True)

    return error_handler.create_json_response(ErrorCode.INTERNAL_SERVER_ERROR)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "flight-search-gateway"}


@app.post("/flights/search", response_model=List[FlightOffer])
async def search_flights(
    request: SearchFlightsRequest,
    sort_by: Optional[str] = Query(default=None, description="price or duration"),
    order: Optional[str] = Query(default=None, description="asc or desc"),
    aggregator: FlightAggregator = Depends(get_flight_aggregator)
):
    """
    Search both airline providers and return the merged offers.

    Args:
        request: Origin, destination and departure date (YYYY-MM-DD)
        sort_by: Optional sort key, price or duration
        order: Optional sort order, asc or desc
        aggregator: Flight aggregator instance (injected dependency)

    Returns:
        List[FlightOffer]: Offers from every provider that answered

    Raises:
        SearchValidationError: on a malformed date or airport code (400)
        AggregateFailure: when no provider returned any offers (500)
    """
    criteria = request.to_criteria()
    logger.info(
        f"Processing flight search {criteria.origin}->{criteria.destination} "
        f"on {criteria.departure_date_str} (sort_by={sort_by}, order={order})"
    )

    flights = await aggregator.search(criteria, SortDirective(sort_by=sort_by, order=order))

    logger.info(f"Returning {len(flights)} offers for {criteria.origin}->{criteria.destination}")
    return flights


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
