"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from telegram_sdk.domain.request import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """SDK settings loaded from environment variables."""

    telegram_bot_token: str
    request_timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
