from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HBYML_", case_sensitive=False)

    version_file: Path = Path("VERSION.txt")
    default_version: str = "0.0.0-SNAPSHOT"
    partial_extension: str = ".hbs"
    log_format: str = "[%(levelname)s] %(message)s"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
