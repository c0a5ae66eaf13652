"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App Info
    app_name: str = "Photo Hunt API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    workers: int = 1

    # Database
    data_dir: str = "."
    db_file: str = "hunt.db"
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    seed_on_startup: bool = True

    @property
    def database_url(self) -> str:
        """SQLite database URL, unless DATABASE_URL is set."""
        if self.database_url_override:
            return self.database_url_override
        db_path = Path(self.data_dir) / self.db_file
        return f"sqlite+aiosqlite:///{db_path}"

    # Uploads
    # "reject" answers 400 on missing fields or unknown task,
    # "accept" logs the problem and stores the submission as given
    upload_validation: Literal["reject", "accept"] = "reject"
    max_upload_mb: int = 50

    # Built client assets (SPA)
    static_dir: str = "dist"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("upload_validation", mode="before")
    @classmethod
    def normalize_validation_mode(cls, v: str) -> str:
        """Accept mode names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def max_upload_bytes(self) -> int:
        """Upload body limit in bytes."""
        return self.max_upload_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
