"""Stage configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "level-dictionary"
    debug: bool = False
    log_level: str = "INFO"

    # Collection policy
    window_size_millis: int = 60_000
    min_rate_per_second: float = 10.0

    # Reject non-positive windows and negative counts instead of passing
    # them through the arithmetic
    strict_validation: bool = False

    model_config = {"env_prefix": "LEVELDICT_"}


settings = Settings()
