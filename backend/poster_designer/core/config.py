"""Configuration management using pydantic-settings."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_TEXT_LENGTH = 100


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gemini API key. When unset the google-genai SDK falls back to
    # GEMINI_API_KEY / GOOGLE_API_KEY from the environment.
    gemini_api_key: Optional[str] = None

    # Model settings
    analysis_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"

    # Poster settings
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH

    # Application settings
    app_name: str = "gemini-poster-designer"

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
