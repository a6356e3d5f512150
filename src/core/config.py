"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Based List Profiles")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(
        default=False,
        description="Render log events as JSON instead of console output",
    )

    # Document store
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the profile/project/upload API",
    )
    request_timeout_seconds: float = Field(default=10.0)

    # Site
    site_url: str = Field(
        default="http://localhost:3000",
        description="Public origin used to build shareable profile links",
    )
    sign_in_path: str = Field(default="/login")
    placeholder_image: str = Field(default="/placeholder.jpg")

    # Reference store server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    upload_max_bytes: int = Field(
        default=5 * 1024 * 1024,
        description="Largest accepted avatar upload in bytes",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
