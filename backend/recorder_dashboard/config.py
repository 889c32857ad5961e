"""
Application configuration management using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"

    # Server
    host: str = "127.0.0.1"
    port: int = 3456
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Context document
    context_document_path: str = "PROJECT_CONTEXT.md"
    anchor_heading: str = "### Contact Us Tests"
    fallback_heading: str = "## UI Test Data"

    # Rendering
    default_test_case_type: str = "UI"
    elements_fence_language: str = "typescript"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
