"""Transport layer types and configuration."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any
from urllib.parse import urlparse

from wdsession.errors import InvalidArgumentError

DEFAULT_REMOTE_URL = "http://127.0.0.1:4444/wd/hub"
DEFAULT_COMMAND_TIMEOUT = 60.0


class TransportEventType(Enum):
    """Types of transport events for observability."""

    CONNECTING = auto()
    CONNECTED = auto()
    DISCONNECTING = auto()
    DISCONNECTED = auto()
    PAYLOAD_SENT = auto()
    RESPONSE_RECEIVED = auto()
    ERROR = auto()


@dataclass
class TransportEvent:
    """Event emitted by transport for observability."""

    type: TransportEventType
    timestamp: float
    data: dict[str, Any] | None = None
    error: Exception | None = None

    def __str__(self) -> str:
        base = f"[{self.type.name}]"
        if self.data:
            base += f" {self.data}"
        if self.error:
            base += f" error={self.error}"
        return base


@dataclass
class TransportConfig:
    """Configuration for the remote end connection."""

    url: str = DEFAULT_REMOTE_URL
    """Address of the remote end. Normalized to end with a slash."""

    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    """Time to wait for the server to answer a command, in seconds."""

    connect_timeout: float = 10.0
    """Connection establishment timeout in seconds."""

    headers: dict[str, str] = field(default_factory=dict)
    """Additional HTTP headers to include in requests."""

    keep_alive: bool = True
    """Whether to use HTTP keep-alive for connection reuse."""

    verify_ssl: bool = True
    """Whether to verify SSL certificates."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.url:
            raise InvalidArgumentError(
                "url", "You must specify a remote address to connect to."
            )
        scheme = urlparse(self.url).scheme
        if scheme not in ("http", "https"):
            raise ValueError(f"Unsupported URL scheme: {scheme or '(none)'}")
        if self.command_timeout <= 0:
            raise ValueError("command_timeout must be positive")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if not self.url.endswith("/"):
            self.url += "/"

    @property
    def new_session_url(self) -> str:
        """Endpoint for the new session command."""
        return f"{self.url}session"
