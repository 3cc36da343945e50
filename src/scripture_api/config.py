"""Configuration management for the scripture study API."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # API Keys
    gemini_api_key: Optional[str] = Field(None, description="Server-side Gemini credential")

    # Firebase
    firebase_service_account_json: Optional[str] = Field(
        None, description="Service account JSON; Application Default Credentials are used when unset"
    )
    cache_collection: str = Field("bible_cache", description="Firestore collection swept by cleanOldCache")

    # Model selection
    content_model: str = Field("gemini-2.0-flash", description="Model used for scripture text retrieval")
    text_model: str = Field("gemini-3-flash-preview", description="Model used for every other text operation")
    image_model: str = Field("gemini-2.5-flash-image", description="Standard image model")
    image_model_hd: str = Field("gemini-3-pro-image-preview", description="Image model selected by modelType='4k'")
    model_temperature: Optional[float] = Field(None, description="Sampling temperature; provider default when unset")

    # Quota retry
    retry_attempts: int = Field(3, ge=0, description="Retries after the first attempt on quota errors")
    retry_initial_delay_ms: int = Field(2000, ge=0, description="Delay before the first retry, doubled each retry")

    # API Configuration
    api_host: str = Field("0.0.0.0")
    api_port: int = Field(8000)
    log_level: str = Field("info")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the application settings."""
    return settings
