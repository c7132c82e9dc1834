"""Response wrapper for Bot API calls."""

import inspect
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError

from telegram_sdk.domain.request import TelegramRequest
from telegram_sdk.exceptions import TelegramResponseException

logger = logging.getLogger(__name__)


class RawResponse(Protocol):
    """Minimal view of an HTTP response returned by a transport."""

    @property
    def status_code(self) -> int:
        """HTTP status code."""

    @property
    def reason_phrase(self) -> str:
        """HTTP reason phrase."""

    def json(self) -> object:
        """Decode the body as JSON."""


class ResponseParameters(BaseModel):
    """Extra error parameters attached to a failed call."""

    migrate_to_chat_id: int | None = None
    retry_after: int | float | None = None


class ApiResult(BaseModel):
    """The JSON envelope every Bot API method returns."""

    ok: bool | None = None
    result: Any = None
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None


@dataclass
class TelegramResponse:
    """Wraps a raw transport result together with its originating request."""

    request: TelegramRequest
    raw: RawResponse | Awaitable[RawResponse]
    body: ApiResult = field(init=False)
    thrown_exception: TelegramResponseException | None = field(init=False)
    _resolved: "TelegramResponse | None" = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.body = ApiResult() if self.is_pending else _decode_body(self.raw)
        self.thrown_exception = (
            TelegramResponseException.create(self) if self.is_error else None
        )

    @property
    def is_pending(self) -> bool:
        """Return True while the raw result is an unresolved awaitable."""
        return inspect.isawaitable(self.raw)

    @property
    def is_error(self) -> bool:
        """Return True when the API reported a failed call."""
        return self.body.ok is False

    @property
    def http_status_code(self) -> int | None:
        """HTTP status of the resolved response."""
        if self.is_pending:
            return None
        return self.raw.status_code

    @property
    def result(self) -> object:
        """The `result` field of the envelope."""
        return self.body.result

    async def resolve(self) -> "TelegramResponse":
        """Await a pending result and raise if the API reported an error.

        The raw awaitable is consumed once; later calls reuse that outcome.
        """
        if not self.is_pending:
            return self
        if self._resolved is None:
            self._resolved = TelegramResponse(self.request, await self.raw)
        if self._resolved.thrown_exception is not None:
            raise self._resolved.thrown_exception
        return self._resolved


def _decode_body(raw: RawResponse) -> ApiResult:
    """Decode a raw body into an envelope, tolerating non-JSON payloads."""
    try:
        data = raw.json()
    except ValueError:
        return ApiResult()
    if not isinstance(data, dict):
        return ApiResult()
    try:
        return ApiResult.model_validate(data)
    except ValidationError:
        logger.warning(
            "Unexpected Bot API response shape", extra={"status": raw.status_code}
        )
        return _salvage_envelope(data)


def _salvage_envelope(data: dict[str, Any]) -> ApiResult:
    """Keep the well-typed envelope fields so `ok: false` is never lost."""
    ok = data.get("ok")
    description = data.get("description")
    error_code = data.get("error_code")
    return ApiResult(
        ok=ok if isinstance(ok, bool) else None,
        result=data.get("result"),
        description=description if isinstance(description, str) else None,
        error_code=(
            error_code
            if isinstance(error_code, int) and not isinstance(error_code, bool)
            else None
        ),
        parameters=_salvage_parameters(data.get("parameters")),
    )


def _salvage_parameters(parameters: object) -> ResponseParameters | None:
    if not isinstance(parameters, dict):
        return None
    try:
        return ResponseParameters.model_validate(parameters)
    except ValidationError:
        return None
