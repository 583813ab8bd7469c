"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_RESOURCES = Path(__file__).parent / "resources"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL",
    )
    mongodb_database: str = Field(default="userdesk", description="MongoDB database name")

    # Mailgun
    mailgun_api_key: str = Field(default="", description="Mailgun API key")
    mailgun_domain: str = Field(default="", description="Mailgun sending domain")
    mailgun_base_url: str = Field(
        default="https://api.mailgun.net",
        description="Mailgun API base URL",
    )
    mailgun_timeout: float = Field(default=10.0, description="Mailgun request timeout (s)")

    # Email
    email_sitename: str = Field(default="Userdesk", description="Sender display name")
    email_sender: str = Field(
        default="no-reply@localhost",
        description="Sender email address",
    )
    mail_templates_dir: Path = Field(
        default=_RESOURCES / "mail",
        description="Directory of <template>.html email templates",
    )
    texts_dir: Path = Field(
        default=_RESOURCES / "texts",
        description="Directory of <language>.json text files",
    )
    default_language: str = Field(default="en", description="Fallback language")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
