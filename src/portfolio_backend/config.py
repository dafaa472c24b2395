"""Configuration management for the application."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the SQLite DB lives here unless DATABASE_URL points elsewhere
    data_root: str = Field(default="~/Documents/portfolio")

    # Database, auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    # Frontend origin allowed by CORS
    frontend_url: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)

    # Seed file used by the bulk loader
    skills_data_file: str = Field(default="config/skills-data.json")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/portfolio.db"
        return self


# Global settings instance
settings = Settings()
