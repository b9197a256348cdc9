"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VOLUNTEER_LOG_",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Volunteer Log")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Command bridge (local only)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8765)

    # Storage
    data_dir: Path = Field(
        default=Path.home() / ".volunteer-log",
        description="Directory holding the SQLite store and legacy files",
    )
    database_url_override: str = Field(
        default="",
        description="Full SQLAlchemy URL; when empty the store lives in data_dir",
    )

    # Views
    per_page: int = Field(default=10, ge=1)

    # Legacy single-person JSON log
    legacy_import_enabled: bool = Field(default=True)
    legacy_profile_name: str = Field(default="Me")

    # CORS (webview dev servers)
    cors_origins: str = Field(
        default="http://localhost:1420,tauri://localhost",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy URL using the aiosqlite driver."""
        if self.database_url_override:
            return self.database_url_override
        return f"sqlite+aiosqlite:///{self.data_dir / 'volunteer_log.db'}"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def legacy_import_path(self) -> Path:
        """Location of the JSON log written by the single-person release."""
        return self.data_dir / "volunteer_log.json"

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
