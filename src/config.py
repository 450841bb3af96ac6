"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority, for Cloud Run)
2. .env file (for local development fallback)

Provider credentials are not stored here: Vertex AI picks them up from
Application Default Credentials (GOOGLE_APPLICATION_CREDENTIALS or the
runtime service account).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. .env file (local development fallback)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Cloud
    google_project_id: str | None = None  # None = project from ADC
    google_location: str = "us-central1"

    # Vertex AI
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float | None = None  # None = provider default
    llm_max_output_tokens: int | None = None
    llm_max_retries: int = 0

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()
