"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    palmsight_env: str = "development"
    palmsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:8081"]

    # Reading defaults
    default_age_now: int = 25
    # Fixed seed for the spiritual-practice pick; unset → fresh randomness per request
    random_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
