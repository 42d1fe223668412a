# files_manager/core/config.py
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT_FOLDER = "files_manager"


class Settings(BaseSettings):
    database_url: str = "sqlite:///./files_manager.db"
    redis_url: str = "redis://localhost:6379/0"

    # where uploaded bytes (and their thumbnails) live on disk
    folder_path: Path = Path(tempfile.gettempdir()) / DEFAULT_ROOT_FOLDER

    session_ttl_seconds: int = 24 * 60 * 60

    # background workers
    worker_concurrency: int = 2
    thumbnail_job_timeout: int = 60

    # outbound mail
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = True
    mail_sender: Optional[str] = None

    log_level: str = "INFO"

    # Tell pydantic-settings to load from .env at project root
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore any extra stuff in .env
    )

    @field_validator("folder_path", mode="before")
    @classmethod
    def _blank_folder_path(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return Path(tempfile.gettempdir()) / DEFAULT_ROOT_FOLDER
        if isinstance(value, str):
            return Path(value.strip())
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
