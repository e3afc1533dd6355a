# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.ALPHA_VANTAGE_BASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Provider API keys are optional at startup. Endpoints that need a missing
# key answer with a 500 "API key is not configured" error instead.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Market Data (Alpha Vantage)
    # -------------------------------------------------------------------------

    ALPHA_VANTAGE_API_KEY: str | None = Field(
        default=None,
        description="Alpha Vantage API key for quotes, search and top movers"
    )

    ALPHA_VANTAGE_BASE_URL: str = Field(
        default="https://www.alphavantage.co/query",
        description="Alpha Vantage query endpoint"
    )

    MARKET_DATA_TIMEOUT_SECONDS: float = Field(
        default=15.0,
        gt=0,
        description="Timeout for each outbound market-data request"
    )

    TOP_MOVERS_LIMIT: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Number of gainers and losers returned by /api/top-movers"
    )

    # -------------------------------------------------------------------------
    # Transactional Email (Resend)
    # -------------------------------------------------------------------------

    RESEND_API_KEY: str | None = Field(
        default=None,
        description="Resend API key for early-access welcome emails"
    )

    RESEND_BASE_URL: str = Field(
        default="https://api.resend.com",
        description="Resend REST API base URL"
    )

    EMAIL_FROM: str = Field(
        default="FinnaCalc <onboarding@resend.dev>",
        description="Sender address for outgoing email"
    )

    EMAIL_SUBJECT: str = Field(
        default="Welcome to the FinnaCalc Early Access!",
        description="Subject line of the early-access welcome email"
    )

    # -------------------------------------------------------------------------
    # OpenAI / Chat Configuration
    # -------------------------------------------------------------------------

    OPENAI_API_KEY: str | None = Field(
        default=None,
        description="OpenAI API key for the FinnaBot chat widget"
    )

    OPENAI_MODEL: str = Field(
        default="gpt-4o-mini",
        description="Chat completion model used by FinnaBot"
    )

    CHAT_TEMPERATURE: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="OpenAI temperature for FinnaBot replies"
    )

    CHAT_MAX_HISTORY: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Max previous chat turns forwarded to the model"
    )

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
        default=8000,
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
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty env vars count as unset, so optional keys stay None
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://finnacalc.com" -> ["http://localhost:3000", "https://finnacalc.com"]
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
