"""Application settings and configuration management."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Where the hotel data document lives."""

    backend: Literal["file", "s3", "memory"] = "file"
    data_file: Path = Path("data") / "data.json"

    # S3 backend
    s3_bucket: str = ""
    s3_key: str = "lavender-stays/data.json"

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class AWSSettings(BaseSettings):
    """AWS service configuration."""

    region: str = "eu-west-2"
    endpoint_url: str = ""  # Optional, e.g. a local S3 emulator
    max_retries: int = 3
    request_timeout: int = 30

    model_config = SettingsConfigDict(env_prefix="AWS_")


class SuggestionServiceSettings(BaseSettings):
    """Alternative-dates suggestion service configuration."""

    base_url: str = "http://localhost:3400"
    endpoint: str = "/suggestAlternativeDatesFlow"
    api_key: str = ""
    request_timeout: int = 30
    max_retries: int = 3

    # Rooms at or above this availability score skip the remote call
    availability_threshold: int = 60

    model_config = SettingsConfigDict(env_prefix="SUGGESTION_")


class APISettings(BaseSettings):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix="API_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    storage: StorageSettings = StorageSettings()
    aws: AWSSettings = AWSSettings()
    suggestion: SuggestionServiceSettings = SuggestionServiceSettings()
    api: APISettings = APISettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_storage(self) -> list[str]:
        """Validate required vars for the selected storage backend. Returns list of missing var names."""
        missing = []
        if self.storage.backend == "s3":
            if not self.storage.s3_bucket.strip():
                missing.append("STORAGE_S3_BUCKET")
            if not self.storage.s3_key.strip():
                missing.append("STORAGE_S3_KEY")
        return missing


# Global settings instance
settings = Settings()
