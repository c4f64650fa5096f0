"""
Substitution engine configuration and settings.

This module provides configuration for the word substitution engine:
the target/substitute word pair, the word-boundary policy, the elements
whose text is never rewritten and the HTML parser backend.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_SKIPPED_TAGS = ("script", "style", "template")
BOUNDARY_POLICIES = ("word", "substring")
SUPPORTED_PARSERS = ("html.parser", "lxml")


class SubstitutionSettings(BaseSettings):
    """Word substitution configuration settings."""

    # Word pair
    target_word: str = Field(default="Yale", description="Word to be replaced")
    substitute_word: str = Field(default="Fale", description="Replacement word")

    # Matching policy
    boundary: str = Field(
        default="word",
        description="Match policy: 'word' requires non-letter boundaries, 'substring' matches anywhere",
    )

    # Elements whose text content is left untouched
    skipped_tags: list[str] = Field(
        default=list(DEFAULT_SKIPPED_TAGS),
        description="Elements whose descendant text is never rewritten",
    )

    # Parser backend
    parser: str = Field(default="html.parser", description="BeautifulSoup tree builder")

    class Config:
        env_prefix = "SUBSTITUTION_"
        case_sensitive = False
        extra = "ignore"

    @field_validator("target_word", "substitute_word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        """Validate that a word is non-blank and contains no whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("Word must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Word must not contain whitespace: {v!r}")
        return v

    @field_validator("boundary")
    @classmethod
    def validate_boundary(cls, v: str) -> str:
        """Validate boundary policy."""
        if v.lower() not in BOUNDARY_POLICIES:
            raise ValueError(f"boundary must be one of: {list(BOUNDARY_POLICIES)}")
        return v.lower()

    @field_validator("skipped_tags")
    @classmethod
    def validate_skipped_tags(cls, v: list[str]) -> list[str]:
        """Normalize skipped tag names to lower case."""
        return [tag.strip().lower() for tag in v if tag.strip()]

    @field_validator("parser")
    @classmethod
    def validate_parser(cls, v: str) -> str:
        """Validate parser backend."""
        if v not in SUPPORTED_PARSERS:
            raise ValueError(f"parser must be one of: {list(SUPPORTED_PARSERS)}")
        return v


substitution_settings = SubstitutionSettings()


def get_substitution_settings() -> SubstitutionSettings:
    """
    Get substitution settings.

    Returns:
        SubstitutionSettings: Substitution settings instance
    """
    return substitution_settings
