"""Configured entry point for calling Bot API methods."""

from collections.abc import Mapping
from dataclasses import dataclass

from telegram_sdk.domain.request import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    TelegramRequest,
)
from telegram_sdk.exceptions import TelegramSDKException
from telegram_sdk.services.telegram_client import TelegramClient


@dataclass
class BotApiService:
    """Builds requests for one bot token and sends them through a client."""

    client: TelegramClient
    token: str
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    def make_request(  # noqa: PLR0913
        self,
        endpoint: str,
        params: Mapping[str, object] | None = None,
        method: str = "POST",
        files: Mapping[str, object] | None = None,
        is_async: bool = False,
    ) -> TelegramRequest:
        """Create a request carrying the configured token and timeouts."""
        return TelegramRequest(
            access_token=self.token,
            endpoint=endpoint,
            method=method,
            params=dict(params or {}),
            files=dict(files or {}),
            timeout=self.timeout,
            connect_timeout=self.connect_timeout,
            is_async=is_async,
        )

    def call(
        self,
        endpoint: str,
        params: Mapping[str, object] | None = None,
        method: str = "POST",
    ) -> object:
        """Call a Bot API method and return its `result` payload."""
        response = self.client.send_request(self.make_request(endpoint, params, method))
        return response.result

    def download_file(self, file_id: str, filename: str) -> str:
        """Resolve a file id via getFile and download it to `filename`."""
        result = self.call("getFile", {"file_id": file_id})
        if not isinstance(result, dict) or not result.get("file_path"):
            raise TelegramSDKException(f"getFile returned no file_path for {file_id}")
        return self.client.download(
            result["file_path"], filename, self.make_request("getFile", method="GET")
        )
