"""Request description for a single Bot API call."""

from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass(frozen=True)
class TelegramRequest:
    """Immutable description of one Bot API call."""

    access_token: str
    endpoint: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, object] = field(default_factory=dict)
    files: Mapping[str, object] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    is_async: bool = False

    @property
    def has_file_uploads(self) -> bool:
        """Return True when the request carries multipart uploads."""
        return bool(self.files)

    @property
    def post_params(self) -> dict[str, object]:
        """Body options for a POST request."""
        if self.has_file_uploads:
            return {"data": self.params, "files": self.files}
        return {"data": self.params}
