"""Abstract base transport and error types."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from wdsession.transport.types import TransportConfig, TransportEvent

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Base exception for transport errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ConnectionError(TransportError):
    """Failed to establish connection to server."""

    pass


class TimeoutError(TransportError):
    """Request or connection timed out."""

    pass


class SessionError(TransportError):
    """Transport is not in a state to send (not connected, closing)."""

    pass


class SessionNotCreatedError(TransportError):
    """The remote end refused to create a session."""

    def __init__(
        self,
        message: str,
        error: str = "session not created",
        status: int | None = None,
    ):
        super().__init__(message)
        self.error = error
        self.status = status

    def __str__(self) -> str:
        base = f"{self.error}: {self.args[0]}"
        if self.status is not None:
            base += f" (HTTP {self.status})"
        return base


class Transport(ABC):
    """
    Abstract base class for remote end transports.

    A transport carries the finished new session payload to the remote
    end and hands back the decoded response body. It does not interpret
    the response and never retries.
    """

    def __init__(self, config: TransportConfig):
        self.config = config
        self._event_handlers: list[Callable[[TransportEvent], None]] = []

    def on_event(self, handler: Callable[[TransportEvent], None]) -> None:
        """
        Register an event handler for transport events.

        Args:
            handler: Callback invoked when transport events occur.
        """
        self._event_handlers.append(handler)

    def _emit_event(self, event: TransportEvent) -> None:
        """Emit an event to all registered handlers."""
        for handler in self._event_handlers:
            try:
                handler(event)
            except Exception as e:
                # Handler errors never affect the transport
                logger.debug(f"Transport event handler failed: {e}")

    @abstractmethod
    async def connect(self) -> None:
        """
        Prepare the transport for sending.

        Raises:
            ConnectionError: If the client cannot be set up.
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """
        Release all resources.

        Safe to call multiple times.
        """
        pass

    @abstractmethod
    async def new_session(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Send a new session payload.

        Args:
            payload: The built payload.

        Returns:
            Decoded JSON response body.

        Raises:
            SessionError: If the transport is not connected.
            TimeoutError: If the server does not answer in time.
            SessionNotCreatedError: If the server returns an error status.
            TransportError: For any other failure.
        """
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is ready to send."""
        pass

    async def __aenter__(self) -> "Transport":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()
