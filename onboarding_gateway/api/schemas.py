"""
Pydantic schemas shared across the API.
"""

from pydantic import BaseModel, Field
from datetime import datetime


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str = Field(..., description="Always \"OK\" while the process is serving")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Server time (UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "OK",
                "service": "Onboarding Gateway",
                "version": "1.0.0",
                "timestamp": "2026-01-01T12:00:00Z"
            }
        }


class NotFoundResponse(BaseModel):
    """Response model for unmatched API routes."""

    error: str = Field(..., description="Always \"Not Found\"")
    message: str = Field(..., description="Method and path that did not match")
    timestamp: datetime = Field(..., description="Server time (UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Not Found",
                "message": "Cannot GET /api/unknown",
                "timestamp": "2026-01-01T12:00:00Z"
            }
        }


class ErrorResponse(BaseModel):
    """Error body returned by the verify endpoints and the global error handler."""

    error: str = Field(..., description="Error message")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Max verification attempts reached"
            }
        }
