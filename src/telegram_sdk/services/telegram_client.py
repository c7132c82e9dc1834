"""Core client that prepares Bot API calls and delegates them to a transport."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from telegram_sdk.adapters.http_client import HttpClient, HttpxHttpClient
from telegram_sdk.domain.request import TelegramRequest
from telegram_sdk.domain.response import RawResponse, TelegramResponse
from telegram_sdk.exceptions import DirectoryCreationError, FileDownloadError

BASE_API_URL = "https://api.telegram.org"
BASE_BOT_URL = f"{BASE_API_URL}/bot"
FILE_URL_TEMPLATE = "{base_api_url}/file/bot{token}/{file_path}"
DOWNLOAD_DIRECTORY_MODE = 0o755

logger = logging.getLogger(__name__)


@dataclass
class TelegramClient:
    """Sends Bot API requests and downloads files through a pluggable transport.

    `http_client` may be swapped between calls, never during one.
    """

    http_client: HttpClient = field(default_factory=HttpxHttpClient.create)

    def send_request(self, request: TelegramRequest) -> TelegramResponse:
        """Send an API request and raise if the API reported an error.

        For async requests the returned response is pending; resolve it with
        `await response.resolve()`.
        """
        url, method, headers, is_async = self.prepare_request(request)
        options = self.get_options(request, method)
        logger.debug(
            "Sending Bot API request",
            extra={"endpoint": request.endpoint, "method": method},
        )
        raw_response = self._configure(request).send(
            url, method, headers, options, is_async
        )
        response = TelegramResponse(request, raw_response)
        if response.thrown_exception is not None:
            raise response.thrown_exception
        return response

    def prepare_request(
        self, request: TelegramRequest
    ) -> tuple[str, str, Mapping[str, str], bool]:
        """Return the url, method, headers and async flag for a request."""
        url = f"{BASE_BOT_URL}/bot{request.access_token}/{request.endpoint}"
        return url, request.method, request.headers, request.is_async

    def get_options(self, request: TelegramRequest, method: str) -> dict[str, object]:
        """Return body options for POST and query options for anything else."""
        if method == "POST":
            return request.post_params
        return {"params": request.params}

    def get_file_url(self, file_path: str, request: TelegramRequest) -> str:
        """Build the download URL for a file stored on Telegram servers."""
        return FILE_URL_TEMPLATE.format(
            base_api_url=BASE_API_URL,
            token=request.access_token,
            file_path=file_path,
        )

    def download(self, file_path: str, filename: str, request: TelegramRequest) -> str:
        """Stream a remote file into `filename` and return it.

        A partially written file is left in place when the download fails.
        """
        _ensure_directory(filename)
        url = self.get_file_url(file_path, request)
        response = self._configure(request).send(
            url, request.method, request.headers, {"sink": filename}, False
        )
        _check_download(response, url, file_path)
        return filename

    async def download_async(
        self, file_path: str, filename: str, request: TelegramRequest
    ) -> str:
        """Coroutine variant of `download` using the async transport path."""
        _ensure_directory(filename)
        url = self.get_file_url(file_path, request)
        response = await self._configure(request).send(
            url, request.method, request.headers, {"sink": filename}, True
        )
        _check_download(response, url, file_path)
        return filename

    def _configure(self, request: TelegramRequest) -> HttpClient:
        return self.http_client.set_timeout(request.timeout).set_connect_timeout(
            request.connect_timeout
        )


def _ensure_directory(filename: str) -> None:
    """Create the parent directory of `filename` unless it already exists."""
    directory = os.path.dirname(filename) or os.curdir
    try:
        _make_directories(directory)
    except OSError as exc:
        if not os.path.isdir(directory):
            raise DirectoryCreationError(
                f"Directory {directory} can't be created"
            ) from exc


def _make_directories(directory: str) -> None:
    """Create `directory` and every missing parent with the download mode.

    `os.makedirs` applies `mode` to the leaf only.
    """
    if os.path.isdir(directory):
        return
    parent = os.path.dirname(os.path.normpath(directory))
    if parent and parent != directory:
        _make_directories(parent)
    try:
        os.mkdir(directory, DOWNLOAD_DIRECTORY_MODE)
    except FileExistsError:
        if not os.path.isdir(directory):
            raise


def _check_download(response: RawResponse, url: str, file_path: str) -> None:
    if response.status_code != 200:  # noqa: PLR2004
        logger.warning(
            "File download failed",
            extra={"file_path": file_path, "status": response.status_code},
        )
        raise FileDownloadError(
            response.reason_phrase, code=response.status_code, url=url
        )
