"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    wavemask_env: str = "development"
    wavemask_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Fallback viewBox when a request or document does not carry one
    default_width: float = 1000.0
    default_height: float = 100.0

    # Decimal places for emitted numbers; None keeps the shortest round-trip form
    number_precision: int | None = None

    # Bezier sampling density for mask coverage
    coverage_samples_per_segment: int = 24

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
