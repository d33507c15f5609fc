"""Engine configuration using Pydantic settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calibration values loaded from environment variables."""

    debug: bool = False

    # Keyword heuristic (no job description)
    skill_baseline: int = 15  # distinct skills counted as full coverage

    # Readability target ranges
    bullet_words_min: int = 8
    bullet_words_max: int = 25
    summary_chars_min: int = 150
    summary_chars_max: int = 400

    # AI rewrite boundary
    improvement_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="ATS_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
