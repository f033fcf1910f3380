# Config
"""
Configuration for the content robot.

Values come from environment variables or a local .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    dev_mode: bool = False
    log_file: Optional[Path] = None

    # Persisted pipeline state
    state_file_path: Path = Path("content.json")
    maximum_sentences: int = Field(default=7, ge=0)

    # Article retrieval (Wikipedia)
    wikipedia_language: str = "en"
    wikipedia_api_url: str = "https://{lang}.wikipedia.org/w/api.php"

    # Keyword extraction (Watson Natural Language Understanding)
    watson_nlu_apikey: Optional[str] = None
    watson_nlu_url: Optional[str] = None
    watson_nlu_version: str = "2021-08-01"

    # Seconds allowed for each external call
    request_timeout: float = Field(default=300.0, gt=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def wikipedia_endpoint(self) -> str:
        """API endpoint for the configured Wikipedia language."""
        return self.wikipedia_api_url.format(lang=self.wikipedia_language)

    def get_log_file_path(self) -> Optional[Path]:
        return self.log_file


# Singleton instance
_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
