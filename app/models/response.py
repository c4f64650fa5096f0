"""
Response models for the Word Substitution Proxy API.

This module defines Pydantic models for API response formatting.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class FetchResponse(BaseModel):
    """
    Response model for a fetched and rewritten page.
    """

    success: bool = Field(default=True, description="Whether the page was processed")
    content: str = Field(..., description="Rewritten HTML document")
    title: str | None = Field(default=None, description="Document title after substitution")
    original_url: str = Field(..., description="Final URL the document was fetched from")
    replacements: int = Field(default=0, description="Number of words replaced")


class HealthResponse(BaseModel):
    """
    Response model for health check endpoints.

    This model provides system health and status information.
    """

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Environment name")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Optional system information
    system: dict[str, Any] | None = Field(default=None)
    metrics: dict[str, Any] | None = Field(default=None)
    dependencies: dict[str, bool] | None = Field(default=None)


class ErrorResponse(BaseModel):
    """
    Response model for error responses.

    This model provides consistent error response formatting.
    """

    error: str = Field(..., description="Error message")
    error_type: str | None = Field(default=None, description="Error type code")
    request_id: str | None = Field(default=None, description="Request identifier")
