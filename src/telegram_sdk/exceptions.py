"""Exception hierarchy for the Telegram SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from telegram_sdk.domain.response import TelegramResponse

UNKNOWN_API_ERROR = "Unknown error from API Response."


class TelegramSDKException(Exception):
    """Base error raised by the SDK."""

    def __init__(
        self, message: str, code: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.url = url


class TelegramTransportError(TelegramSDKException):
    """Network-level failure reported by the HTTP client."""


class DirectoryCreationError(TelegramSDKException):
    """Destination directory for a download could not be created."""


class FileDownloadError(TelegramSDKException):
    """File download finished with a non-200 status."""


class TelegramResponseException(TelegramSDKException):
    """API-level error reported in the response envelope."""

    def __init__(
        self,
        response: "TelegramResponse",
        message: str,
        code: int | None = None,
        retry_after: int | float | None = None,
        migrate_to_chat_id: int | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.response = response
        self.retry_after = retry_after
        self.migrate_to_chat_id = migrate_to_chat_id

    @classmethod
    def create(cls, response: "TelegramResponse") -> "TelegramResponseException":
        """Build an exception from an erroneous response envelope."""
        body = response.body
        parameters = body.parameters
        return cls(
            response,
            message=body.description or UNKNOWN_API_ERROR,
            code=body.error_code,
            retry_after=parameters.retry_after if parameters else None,
            migrate_to_chat_id=parameters.migrate_to_chat_id if parameters else None,
        )
