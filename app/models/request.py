"""
Request models for the Word Substitution Proxy API.

This module defines Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field, field_validator


class FetchRequest(BaseModel):
    """
    Request model for fetching and rewriting a remote page.

    The URL is optional at the model level so that a missing value can be
    answered with the API's own error envelope instead of a validation dump.
    """

    url: str | None = Field(default=None, description="Absolute http(s) URL of the page to fetch")

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, v: object) -> str | None:
        """Strip whitespace and treat blank URLs as missing."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("url must be a string")
        v = v.strip()
        return v or None
