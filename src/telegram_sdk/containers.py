"""Dependency container wiring for the SDK."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from telegram_sdk.adapters.http_client import HttpxHttpClient
from telegram_sdk.config import Settings
from telegram_sdk.services.bot_api import BotApiService
from telegram_sdk.services.telegram_client import TelegramClient


@dataclass
class ClientContainer:
    """Holds the configured client and its collaborators."""

    settings: Settings
    http_client: HttpxHttpClient
    telegram_client: TelegramClient
    bot_api: BotApiService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> ClientContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_client = HttpxHttpClient.create()
    telegram_client = TelegramClient(http_client=http_client)
    bot_api = BotApiService(
        client=telegram_client,
        token=resolved_settings.telegram_bot_token,
        timeout=resolved_settings.request_timeout,
        connect_timeout=resolved_settings.connect_timeout,
    )

    async def close_resources() -> None:
        await http_client.close()

    return ClientContainer(
        settings=resolved_settings,
        http_client=http_client,
        telegram_client=telegram_client,
        bot_api=bot_api,
        close_resources=close_resources,
    )
