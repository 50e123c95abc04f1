"""
Error Response Schema

Every 4xx/5xx response body has this shape, whether it comes from a domain
error, a malformed request or an unexpected failure.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Generic error body: `{"status": 404, "error": "author not found"}`."""

    status: int = Field(..., description="HTTP status code", examples=[404])
    error: str = Field(..., description="Short description of the failure")
