# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a development default, so the API starts with no
# configuration at all.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Payout Settings
    # -------------------------------------------------------------------------
    # Factorization is trial division up to sqrt(n), so this bounds the work
    # done per request (10**12 -> at most ~10**6 divisions).

    MAX_EPOCH: int = Field(
        default=10**12,
        ge=1,
        description="Largest epoch number accepted by the payouts endpoint"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty values as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Handles comma-separated values and strips whitespace.
        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
