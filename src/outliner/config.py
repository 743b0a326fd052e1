"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `OUTLINER_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Outliner settings.

    All fields are environment-configurable. Prefix is `OUTLINER_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTLINER_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Storage
    store_backend: Literal["file", "redis"] = Field(default="file")
    data_dir: Path = Field(default=Path("data"))

    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_key_prefix: str = Field(default="outliner")

    # Documents
    # Everyone editing the "share" scope writes to this owner.
    share_owner: str = Field(default="share")

    # API
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000, ge=1, le=65535)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("OUTLINER_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
