"""
Transport Layer.

Carries the new session payload to the remote end over HTTP.
"""

from wdsession.transport.types import (
    TransportConfig,
    TransportEvent,
    TransportEventType,
    DEFAULT_REMOTE_URL,
    DEFAULT_COMMAND_TIMEOUT,
)
from wdsession.transport.base import (
    Transport,
    TransportError,
    ConnectionError,
    TimeoutError,
    SessionError,
    SessionNotCreatedError,
)
from wdsession.transport.http import HTTPTransport

__all__ = [
    "Transport",
    "TransportConfig",
    "TransportEvent",
    "TransportEventType",
    "DEFAULT_REMOTE_URL",
    "DEFAULT_COMMAND_TIMEOUT",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "SessionError",
    "SessionNotCreatedError",
    "HTTPTransport",
]
