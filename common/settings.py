from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_", env_file=".env", extra="ignore"
    )

    # Config file
    config_path: Path = Field(default=PROJECT_ROOT / "config" / "config.yaml")

    # Directories
    state_dir: Path = Field(default=Path("data/state"))
    export_dir: Path = Field(default=Path("data/exports"))

    # Logging
    log_level: str = "INFO"


settings = Settings()
