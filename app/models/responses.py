"""Response models for the Flight Search Gateway."""

from pydantic import BaseModel, Field, ConfigDict


class ErrorDetail(BaseModel):
    """Status and message carried inside the error envelope."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error response model for consistent error handling."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "status": 400,
                    "message": "Invalid airport code for origin"
                }
            }
        }
    )

    error: ErrorDetail
