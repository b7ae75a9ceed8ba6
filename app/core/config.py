"""Application configuration settings."""

from typing import ClassVar, Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    _app_name_base: ClassVar[str] = "Library Metadata API"

    # Determine if we are in development mode
    environment: str = "development"  # "development" or "production"
    is_development: bool = True
    is_production: bool = False

    # API Settings
    app_name: str = _app_name_base
    app_version: str = "1.0.0"
    app_description: str = (
        "Read-only metadata for libraries, their published versions and tutorials"
    )

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 5050
    reload: Optional[bool] = None
    log_level: str = "info"

    # Record store Settings
    record_store: str = "json"  # "json" or "database"
    data_file: str = "data/libraries.json"
    database_url: str = "sqlite:///data/libraries.db"

    # Base URL used to build a library's 'latest' URL when the record lacks one
    cdn_base_url: str = "https://cdnjs.cloudflare.com/ajax/libs"

    # API Settings
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    openapi_url: str = "/openapi.json"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("record_store")
    @classmethod
    def _validate_record_store(cls, value: str) -> str:
        normalized = (value or "").strip().lower()
        if normalized not in {"json", "database"}:
            raise ValueError(f"Unsupported record store '{value}'")
        return normalized

    @field_validator("cdn_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _set_environment_flags(self):
        env = (self.environment or "").strip().lower()
        self.is_development = env in {"development", "dev", "local"}
        self.is_production = not self.is_development
        if self.reload is None:
            self.reload = self.is_development

        # Only auto-append the development suffix when using the default base name
        if self.app_name in {
            self._app_name_base,
            f"{self._app_name_base} (Development)",
        }:
            suffix = " (Development)" if self.is_development else ""
            self.app_name = f"{self._app_name_base}{suffix}"

        return self


# Global settings instance
settings = Settings()
