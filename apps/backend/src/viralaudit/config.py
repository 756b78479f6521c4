"""Configuration management for ViralAudit."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 100 MiB
MAX_UPLOAD_BYTES = 100 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VIRALAUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Inference engine
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "VIRALAUDIT_GEMINI_API_KEY",
            "GEMINI_API_KEY",
            "GOOGLE_API_KEY",
            "API_KEY",
        ),
    )
    gemini_model: str = "gemini-2.5-flash"

    # Uploads
    max_upload_bytes: int = MAX_UPLOAD_BYTES


# Global settings instance
settings = Settings()
