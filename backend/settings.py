"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.catalog_cache_ttl_seconds)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    CATALOG_CACHE_MAX_SIZE,
    CATALOG_CACHE_TTL_SECONDS,
    DELOAD_SESSION_LIMIT,
    MIN_REMOTE_CATALOG_SIZE,
)
from infrastructure.exercisedb_client import DEFAULT_HOST


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # ExerciseDB (RapidAPI)
    # -------------------------------------------------------------------------
    rapidapi_key: Optional[str] = Field(
        default=None,
        description="RapidAPI key for ExerciseDB; the static library is used when unset",
    )
    exercisedb_host: str = Field(
        default=DEFAULT_HOST,
        description="RapidAPI host of the ExerciseDB API",
    )
    exercisedb_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="ExerciseDB request timeout",
    )

    # -------------------------------------------------------------------------
    # Exercise Catalog
    # -------------------------------------------------------------------------
    catalog_cache_ttl_seconds: int = Field(
        default=CATALOG_CACHE_TTL_SECONDS,
        gt=0,
        le=3600,
        description="Lifetime of a cached remote catalog (API terms allow at most one hour)",
    )
    catalog_cache_max_size: int = Field(
        default=CATALOG_CACHE_MAX_SIZE,
        ge=1,
        description="Maximum cached catalog responses",
    )
    catalog_min_exercises: int = Field(
        default=MIN_REMOTE_CATALOG_SIZE,
        ge=0,
        description="Remote catalogs smaller than this fall back to the static library",
    )

    # -------------------------------------------------------------------------
    # Deload Detection
    # -------------------------------------------------------------------------
    deload_session_limit: int = Field(
        default=DELOAD_SESSION_LIMIT,
        ge=1,
        description="Recent workouts considered for deload detection",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def exercisedb_configured(self) -> bool:
        return bool(self.rapidapi_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
