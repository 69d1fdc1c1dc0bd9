"""
Centralized application configuration.

All settings are driven by environment variables with sensible defaults.
Uses Pydantic BaseSettings for validation and type coercion.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Application ---
    app_name: str = "stylelog"
    app_version: str = "0.1.0"
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR

    # --- Request logging ---
    # minified | inline | agent | error | default. Left as a plain string:
    # an unknown value is reported by the middleware, not rejected here.
    log_style: str = "default"

    # --- CORS ---
    allowed_origins: list[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
