"""Application settings via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings via environment variables."""

    # LLM Provider Selection
    # Options: "openai" or "anthropic" (direct APIs)
    llm_provider: Literal["openai", "anthropic"] = "openai"

    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Overrides the provider's default model when set
    default_model: str | None = None

    # Ask-anything search completion
    search_temperature: float = 0.7
    search_max_tokens: int = 1000

    # Initial suggested questions completion
    suggestion_temperature: float = 0.8
    suggestion_max_tokens: int = 200

    # Upper bound for a single provider call
    provider_timeout_seconds: float = 8.0

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
