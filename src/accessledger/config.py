"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from accessledger.domain.entities import DEFAULT_ROLES


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API server
    api_host: str = Field(default="0.0.0.0", description="Bind address")
    api_port: int = Field(default=8000, description="Bind port")

    # Access ledger
    base_access_role: str | None = Field(
        default=None,
        description="Role every user must hold on every access check",
    )
    admin_role: str = Field(
        default="admin",
        description="Role a user must hold to administer the ledger",
    )
    bootstrap_admins: list[str] = Field(
        default_factory=list,
        description="User ids granted admin_role at startup",
    )
    default_roles: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ROLES),
        description="Initial role registry (name -> key)",
    )

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
