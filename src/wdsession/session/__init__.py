"""
Session request assembly.

The aggregator collects option sets and extension settings under the
no-overlap rule; the payload builder turns it into the wire structure.
"""

from wdsession.session.aggregator import SessionAggregator
from wdsession.session.payload import (
    Payload,
    build_payload,
    serialize_payload,
    CAPABILITIES,
    ALWAYS_MATCH,
    FIRST_MATCH,
    DESIRED_CAPABILITIES,
    REQUIRED_CAPABILITIES,
)

__all__ = [
    "SessionAggregator",
    "Payload",
    "build_payload",
    "serialize_payload",
    "CAPABILITIES",
    "ALWAYS_MATCH",
    "FIRST_MATCH",
    "DESIRED_CAPABILITIES",
    "REQUIRED_CAPABILITIES",
]
