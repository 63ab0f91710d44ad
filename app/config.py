# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATA_DIR)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Everything has a development default so the API boots with an empty
    environment. Admin credentials are the exception: login answers 500
    until ADMIN_EMAIL/ADMIN_PASSWORD or the credentials file is set up.
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
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing admin tokens"
    )

    ADMIN_EMAIL: str | None = Field(
        default=None,
        description="Admin login email (takes precedence over the credentials file)"
    )

    ADMIN_PASSWORD: str | None = Field(
        default=None,
        description="Admin login password"
    )

    ADMIN_CREDENTIALS_FILE: str | None = Field(
        default=None,
        description="JSON file holding {email, password}; defaults to <DATA_DIR>/admin.json"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:5173,http://localhost:3000,https://udaaro-frontend.vercel.app",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    STORAGE_BACKEND: Literal["file", "supabase"] = Field(
        default="file",
        description="Where records live: JSON files or Supabase tables"
    )

    DATA_DIR: str = Field(
        default="data",
        description="Directory holding <collection>.json files (file backend)"
    )

    FAIL_OPEN_READS: bool = Field(
        default=True,
        description="Serve an empty list (flagged degraded) when a collection can't be read"
    )

    SUPABASE_URL: str | None = Field(
        default=None,
        description="Supabase project URL (required for the supabase backend)"
    )

    SUPABASE_SERVICE_KEY: str | None = Field(
        default=None,
        description="Supabase service_role key (bypasses RLS)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def data_path(self) -> Path:
        return Path(self.DATA_DIR)

    @property
    def admin_credentials_path(self) -> Path:
        """Credentials file location, falling back to admin.json in the data dir."""
        if self.ADMIN_CREDENTIALS_FILE:
            return Path(self.ADMIN_CREDENTIALS_FILE)
        return self.data_path / "admin.json"

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
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
