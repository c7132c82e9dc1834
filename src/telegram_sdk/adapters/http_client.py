"""Pluggable HTTP transport used by the Telegram client."""

from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from telegram_sdk.domain.request import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT
from telegram_sdk.domain.response import RawResponse
from telegram_sdk.exceptions import TelegramTransportError


class HttpClient(Protocol):
    """Interface for the transport behind `TelegramClient`."""

    def set_timeout(self, seconds: float) -> "HttpClient":
        """Set the response timeout for subsequent sends."""

    def set_connect_timeout(self, seconds: float) -> "HttpClient":
        """Set the connect timeout for subsequent sends."""

    def send(  # noqa: PLR0913
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        options: Mapping[str, object],
        is_async: bool = False,
    ) -> RawResponse | Awaitable[RawResponse]:
        """Send a request, or stream the body into `options["sink"]` if given.

        Returns an awaitable instead of a response when `is_async` is set.
        """


@dataclass
class HttpxHttpClient(HttpClient):
    """HTTP transport implemented with httpx."""

    http_client: httpx.Client
    async_http_client: httpx.AsyncClient
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    @classmethod
    def create(cls) -> "HttpxHttpClient":
        """Create a transport with managed httpx sessions."""
        return cls(http_client=httpx.Client(), async_http_client=httpx.AsyncClient())

    def set_timeout(self, seconds: float) -> "HttpxHttpClient":
        """Set the response timeout."""
        self.timeout = seconds
        return self

    def set_connect_timeout(self, seconds: float) -> "HttpxHttpClient":
        """Set the connect timeout."""
        self.connect_timeout = seconds
        return self

    def send(  # noqa: PLR0913
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        options: Mapping[str, object],
        is_async: bool = False,
    ) -> httpx.Response | Awaitable[httpx.Response]:
        """Send a request through the sync or async httpx session."""
        request_options = dict(options)
        sink = request_options.pop("sink", None)
        request_options["headers"] = dict(headers)
        request_options["timeout"] = httpx.Timeout(
            self.timeout, connect=self.connect_timeout
        )
        if is_async:
            return self._send_async(method, url, request_options, sink)
        try:
            if sink is None:
                return self.http_client.request(method, url, **request_options)
            with self.http_client.stream(method, url, **request_options) as response:
                with open(sink, "wb") as file:
                    for chunk in response.iter_bytes():
                        file.write(chunk)
            return response
        except httpx.TransportError as exc:
            raise TelegramTransportError(str(exc) or type(exc).__name__) from exc

    async def _send_async(
        self,
        method: str,
        url: str,
        request_options: dict[str, object],
        sink: object | None,
    ) -> httpx.Response:
        try:
            if sink is None:
                return await self.async_http_client.request(
                    method, url, **request_options
                )
            async with self.async_http_client.stream(
                method, url, **request_options
            ) as response:
                with open(sink, "wb") as file:
                    async for chunk in response.aiter_bytes():
                        file.write(chunk)
            return response
        except httpx.TransportError as exc:
            raise TelegramTransportError(str(exc) or type(exc).__name__) from exc

    async def close(self) -> None:
        """Close the underlying HTTP sessions."""
        self.http_client.close()
        await self.async_http_client.aclose()
