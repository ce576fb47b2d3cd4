"""
Application configuration using Pydantic Settings
"""

import json
from functools import lru_cache
from typing import Annotated, List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="Team BFF", description="Application name")
    app_env: str = Field(default="development", description="Environment")
    debug: bool = Field(default=False, description="Debug mode")
    api_prefix: str = Field(default="/api", description="Inbound API prefix")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Upstream API
    upstream_base_url: str = Field(
        default="https://api.peionio.com/v0",
        validation_alias=AliasChoices("upstream_base_url", "api_base_url"),
        description="Base URL every operation is forwarded to",
    )
    upstream_timeout_seconds: float = Field(default=30.0, gt=0)
    access_token: str | None = Field(
        default=None,
        description="Bearer token held at startup, before any login",
    )

    # CORS
    # NoDecode lets the validator accept comma-separated origins
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:4200", "http://localhost:3000"]
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("upstream_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
