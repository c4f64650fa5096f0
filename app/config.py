"""
Configuration settings for the Word Substitution Proxy application.

This module handles environment variables, application settings,
and configuration validation using Pydantic Settings.
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden using environment variables
    with the same name (case-insensitive).
    """

    # Application settings
    APP_NAME: str = "Word Substitution Proxy"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # CORS settings
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:3001"]
    ALLOWED_HOSTS: list[str] = ["*"]

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Outbound fetch settings
    FETCH_TIMEOUT: int = 10  # seconds
    MAX_CONTENT_LENGTH: int = 10 * 1024 * 1024  # 10MB
    USER_AGENT: str = (
        "Mozilla/5.0 (compatible; WordSubstitutionProxy/0.1; +http://localhost)"
    )

    # Web UI settings
    TEMPLATES_DIR: str = str(Path(__file__).parent / "templates")

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        allowed_envs = ["development", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"ENVIRONMENT must be one of {allowed_envs}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level setting."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("FETCH_TIMEOUT")
    @classmethod
    def validate_fetch_timeout(cls, v: int) -> int:
        """Validate outbound request timeout."""
        if v <= 0:
            raise ValueError("FETCH_TIMEOUT must be positive")
        if v > 120:
            raise ValueError("FETCH_TIMEOUT cannot exceed 120 seconds")
        return v

    @field_validator("MAX_CONTENT_LENGTH")
    @classmethod
    def validate_max_content_length(cls, v: int) -> int:
        """Validate maximum fetched document size."""
        if v <= 0:
            raise ValueError("MAX_CONTENT_LENGTH must be positive")
        if v > 50 * 1024 * 1024:  # 50MB
            raise ValueError("MAX_CONTENT_LENGTH cannot exceed 50MB")
        return v

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Create settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Get application settings.

    Returns:
        Settings: Application settings instance
    """
    return settings


# Note: Environment-specific configurations should be set via environment variables
# Example .env for production:
#   ENVIRONMENT=production
#   DEBUG=false
#   LOG_LEVEL=WARNING
#   ALLOWED_ORIGINS=["https://your-domain.com"]
#   ALLOWED_HOSTS=["your-domain.com"]
#   SUBSTITUTION_TARGET_WORD=Yale
#   SUBSTITUTION_SUBSTITUTE_WORD=Fale
