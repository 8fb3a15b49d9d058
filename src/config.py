# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the access control service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "CastQuest Admin"
    log_level: str = "INFO"
    # Shared secret expected in the X-Admin-Token header
    admin_api_token: SecretStr | None = None
    cors_origins: list[str] = ["http://localhost:3000"]


settings = Settings()
