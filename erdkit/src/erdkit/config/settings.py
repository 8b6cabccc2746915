"""Application settings using Pydantic Settings."""

from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import find_dotenv, load_dotenv

# Variables already present in the environment win over the .env file
_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)


class Settings(BaseSettings):
    """erdkit configuration, read from the environment (case-insensitive)."""

    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Ceiling applied to .json and .xlsx files before they are read
    max_file_size_mb: int = 10
    # Default output directory for CLI exports
    export_dir: Path = Path("exports")

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
