"""HTTP transport for the new session command."""

from __future__ import annotations

import time
from typing import Any

import httpx

from wdsession.lib import oj
from wdsession.transport.base import (
    Transport,
    TransportError,
    ConnectionError,
    TimeoutError,
    SessionError,
    SessionNotCreatedError,
)
from wdsession.transport.types import (
    TransportConfig,
    TransportEvent,
    TransportEventType,
)

JSON_MIME_TYPE = "application/json"
CONTENT_TYPE_HEADER = JSON_MIME_TYPE + ";charset=utf-8"
REQUEST_ACCEPT_HEADER = JSON_MIME_TYPE + ", image/png"


class HTTPTransport(Transport):
    """
    Sends the new session payload with a single HTTP POST.

    One request per call: no retries, no streaming.
    """

    def __init__(self, config: TransportConfig):
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None
        self._connected: bool = False
        self._closing: bool = False

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._connected:
            return

        self._emit_event(
            TransportEvent(
                type=TransportEventType.CONNECTING,
                timestamp=time.time(),
                data={"url": self.config.url},
            )
        )

        try:
            timeout = httpx.Timeout(
                connect=self.config.connect_timeout,
                read=self.config.command_timeout,
                write=self.config.command_timeout,
                pool=self.config.command_timeout,
            )
            limits = httpx.Limits(
                max_keepalive_connections=None if self.config.keep_alive else 0,
            )

            self._client = httpx.AsyncClient(
                timeout=timeout,
                headers=self.config.headers,
                verify=self.config.verify_ssl,
                limits=limits,
            )
            self._connected = True
            self._closing = False

            self._emit_event(
                TransportEvent(
                    type=TransportEventType.CONNECTED,
                    timestamp=time.time(),
                )
            )

        except Exception as e:
            raise ConnectionError(f"Failed to initialize HTTP client: {e}", cause=e)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if not self._connected and self._client is None:
            return

        self._closing = True

        self._emit_event(
            TransportEvent(
                type=TransportEventType.DISCONNECTING,
                timestamp=time.time(),
            )
        )

        if self._client:
            await self._client.aclose()
            self._client = None

        self._connected = False

        self._emit_event(
            TransportEvent(
                type=TransportEventType.DISCONNECTED,
                timestamp=time.time(),
            )
        )

    async def new_session(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST the payload to {url}session and return the decoded body."""
        if not self._client or not self._connected:
            raise SessionError("Transport not connected")

        if self._closing:
            raise SessionError("Transport is closing")

        headers = {
            "Content-Type": CONTENT_TYPE_HEADER,
            "Accept": REQUEST_ACCEPT_HEADER,
        }
        body = oj.dumps(payload)

        self._emit_event(
            TransportEvent(
                type=TransportEventType.PAYLOAD_SENT,
                timestamp=time.time(),
                data={"url": self.config.new_session_url, "bytes": len(body)},
            )
        )

        try:
            response = await self._client.post(
                self.config.new_session_url,
                content=body,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            self._emit_error(e)
            raise TimeoutError(f"Request timed out: {e}", cause=e)
        except httpx.HTTPError as e:
            self._emit_error(e)
            raise TransportError(f"HTTP error: {e}", cause=e)

        self._emit_event(
            TransportEvent(
                type=TransportEventType.RESPONSE_RECEIVED,
                timestamp=time.time(),
                data={"status": response.status_code},
            )
        )

        result = self._decode(response)

        if response.status_code >= 400:
            error, message = _error_details(result, response.text)
            raise SessionNotCreatedError(message, error=error, status=response.status_code)

        if not isinstance(result, dict):
            raise TransportError(f"Unexpected response body: {response.text!r}")

        return result

    def _emit_error(self, error: Exception) -> None:
        self._emit_event(
            TransportEvent(
                type=TransportEventType.ERROR,
                timestamp=time.time(),
                error=error,
            )
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a JSON body; None if the body is empty or not JSON."""
        if not response.content:
            return None
        # Servers send NUL-padded bodies now and then
        content = response.content.split(b"\0", 1)[0]
        try:
            return oj.loads(content)
        except ValueError as e:
            if response.status_code >= 400:
                return None
            raise TransportError(f"Failed to parse response: {e}", cause=e)

    def is_connected(self) -> bool:
        """Check if transport is connected."""
        return self._connected and not self._closing


def _error_details(body: Any, text: str) -> tuple[str, str]:
    """Extract (error, message) from an error response body."""
    if isinstance(body, dict):
        value = body.get("value")
        if isinstance(value, dict) and "error" in value:
            return str(value["error"]), str(value.get("message", ""))
        if "error" in body:
            return str(body["error"]), str(body.get("message", ""))
    return "session not created", text
