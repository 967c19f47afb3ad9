"""New session negotiation with a remote end."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wdsession.session.aggregator import SessionAggregator
from wdsession.session.payload import serialize_payload
from wdsession.transport.base import SessionNotCreatedError, Transport

logger = logging.getLogger(__name__)


class Dialect(Enum):
    """Protocol dialect the remote end answered in."""

    W3C = "w3c"
    LEGACY = "legacy"


@dataclass
class NewSessionResult:
    """
    Result of a successful new session command.

    Contains the session id and the capabilities the remote end matched.
    """

    session_id: str
    """Session identifier assigned by the remote end."""

    capabilities: dict[str, Any] = field(default_factory=dict)
    """Capabilities echoed by the remote end."""

    dialect: Dialect = Dialect.W3C
    """Response shape the remote end used."""

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "NewSessionResult":
        """
        Parse a new session response body.

        W3C remote ends answer {"value": {"sessionId", "capabilities"}};
        legacy ones answer {"sessionId", "status", "value": {...}}.

        Raises:
            SessionNotCreatedError: For error bodies or a missing session id.
        """
        value = data.get("value")

        if isinstance(value, dict) and "error" in value:
            raise SessionNotCreatedError(
                str(value.get("message", "")),
                error=str(value["error"]),
            )

        if isinstance(value, dict) and value.get("sessionId"):
            return cls(
                session_id=str(value["sessionId"]),
                capabilities=value.get("capabilities") or {},
                dialect=Dialect.W3C,
            )

        if data.get("sessionId"):
            status = data.get("status", 0)
            if status:
                raise SessionNotCreatedError(
                    str(value.get("message", "") if isinstance(value, dict) else value),
                    error=f"status {status}",
                )
            return cls(
                session_id=str(data["sessionId"]),
                capabilities=value if isinstance(value, dict) else {},
                dialect=Dialect.LEGACY,
            )

        raise SessionNotCreatedError("Response did not contain a session id")

    def __str__(self) -> str:
        browser = self.capabilities.get("browserName", "unknown")
        return (
            f"NewSessionResult(session={self.session_id}, "
            f"browser={browser}, dialect={self.dialect.value})"
        )


class SessionNegotiator:
    """
    Sends a session request built from an aggregator.

    Builds the payload, hands it to the transport, and parses the reply.
    """

    def __init__(self, transport: Transport, aggregator: SessionAggregator):
        """
        Initialize the negotiator.

        Args:
            transport: Connected transport to the remote end.
            aggregator: Session options to request.
        """
        self.transport = transport
        self.aggregator = aggregator
        self._result: NewSessionResult | None = None

    @property
    def result(self) -> NewSessionResult | None:
        """Negotiation result, or None before negotiate() succeeds."""
        return self._result

    @property
    def is_negotiated(self) -> bool:
        """Check if negotiation has completed successfully."""
        return self._result is not None

    async def negotiate(self) -> NewSessionResult:
        """
        Create the session.

        Returns:
            NewSessionResult with the session id and matched capabilities.

        Raises:
            SessionNotCreatedError: If the remote end refused.
            TransportError: If the request failed.
        """
        payload = self.aggregator.to_payload()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Sending new session payload:\n"
                f"{serialize_payload(payload, indent=True)}"
            )

        response = await self.transport.new_session(payload)
        result = NewSessionResult.from_response(response)

        logger.info(f"Created session: {result}")
        self._result = result
        return result


async def create_remote_session(
    transport: Transport,
    aggregator: SessionAggregator,
) -> NewSessionResult:
    """
    Convenience function for creating a session.

    Args:
        transport: Connected transport.
        aggregator: Session options to request.

    Returns:
        NewSessionResult for the created session.
    """
    negotiator = SessionNegotiator(transport=transport, aggregator=aggregator)
    return await negotiator.negotiate()
