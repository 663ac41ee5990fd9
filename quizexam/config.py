"""
Configuration for quizexam-cli.

Uses Pydantic Settings for environment variable management with .env file support.
Nested values use a double underscore, e.g. QUIZEXAM_API__BASE_URL.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseModel):
    """Connection settings for the quiz service."""

    base_url: str = "http://localhost:8080"
    timeout_seconds: float = 5.0

    # Endpoints
    banks_endpoint: str = "/api/quiz-banks"
    questions_endpoint: str = "/api/quiz-questions"


class QuizExamConfig(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZEXAM_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api: ApiConfig = Field(default_factory=ApiConfig)
    log_level: str = Field(
        default="WARNING",
        description="Minimum level written to stderr",
    )


@lru_cache(maxsize=1)
def get_settings() -> QuizExamConfig:
    """Get cached settings instance."""
    return QuizExamConfig()
