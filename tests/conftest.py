"""Shared test fixtures."""

from collections.abc import Awaitable, Mapping
from dataclasses import dataclass, field

import pytest

from telegram_sdk.adapters.http_client import HttpClient
from telegram_sdk.config import Settings
from telegram_sdk.domain.request import TelegramRequest
from telegram_sdk.services.bot_api import BotApiService
from telegram_sdk.services.telegram_client import TelegramClient


@dataclass
class FakeRawResponse:
    """Scripted transport result; `payload=None` means a non-JSON body."""

    status_code: int = 200
    payload: object = field(default_factory=lambda: {"ok": True, "result": {}})
    reason_phrase: str = "OK"

    def json(self) -> object:
        if self.payload is None:
            raise ValueError("Response body is not JSON")
        return self.payload


@dataclass(frozen=True)
class SentRequest:
    """A single call recorded by the fake transport."""

    url: str
    method: str
    headers: Mapping[str, str]
    options: Mapping[str, object]
    is_async: bool
    timeout: float | None
    connect_timeout: float | None


@dataclass
class RecordingHttpClient(HttpClient):
    """Fake transport that records sends and replays scripted responses."""

    responses: list[FakeRawResponse] = field(default_factory=list)
    calls: list[SentRequest] = field(default_factory=list)
    timeout: float | None = None
    connect_timeout: float | None = None

    def set_timeout(self, seconds: float) -> "RecordingHttpClient":
        self.timeout = seconds
        return self

    def set_connect_timeout(self, seconds: float) -> "RecordingHttpClient":
        self.connect_timeout = seconds
        return self

    def send(  # noqa: PLR0913
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        options: Mapping[str, object],
        is_async: bool = False,
    ) -> FakeRawResponse | Awaitable[FakeRawResponse]:
        self.calls.append(
            SentRequest(
                url=url,
                method=method,
                headers=headers,
                options=options,
                is_async=is_async,
                timeout=self.timeout,
                connect_timeout=self.connect_timeout,
            )
        )
        response = self.responses.pop(0) if self.responses else FakeRawResponse()
        if is_async:
            return _resolved(response)
        return response


async def _resolved(response: FakeRawResponse) -> FakeRawResponse:
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(telegram_bot_token="test-token")


@pytest.fixture
def http_client() -> RecordingHttpClient:
    return RecordingHttpClient()


@pytest.fixture
def telegram_client(http_client: RecordingHttpClient) -> TelegramClient:
    return TelegramClient(http_client=http_client)


@pytest.fixture
def bot_api(telegram_client: TelegramClient) -> BotApiService:
    return BotApiService(
        client=telegram_client, token="T1", timeout=5, connect_timeout=2
    )


@pytest.fixture
def get_me_request() -> TelegramRequest:
    return TelegramRequest(access_token="T1", endpoint="getMe", method="GET")
