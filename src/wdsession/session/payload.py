"""New session payload construction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from wdsession.lib import oj
from wdsession.settings.base import serializable_object

if TYPE_CHECKING:
    from wdsession.session.aggregator import SessionAggregator

logger = logging.getLogger(__name__)

Payload = dict[str, Any]

# Top-level payload keys
CAPABILITIES = "capabilities"
ALWAYS_MATCH = "alwaysMatch"
FIRST_MATCH = "firstMatch"
DESIRED_CAPABILITIES = "desiredCapabilities"
REQUIRED_CAPABILITIES = "requiredCapabilities"


def build_payload(aggregator: "SessionAggregator") -> Payload:
    """
    Build the new session payload from an aggregator.

    The structured form always appears under "capabilities", with
    "alwaysMatch" for the must-match set and "firstMatch" for the
    alternatives. With legacy capabilities enabled, "desiredCapabilities"
    holds the first alternative, or the must-match set when there are no
    alternatives. Extension settings become top-level entries.

    Option sets are flattened on every call. The same flattened dict may
    appear under more than one key.

    Args:
        aggregator: The session aggregator.

    Returns:
        Plain nested dict ready for serialization.
    """
    payload: Payload = {}
    capabilities: dict[str, Any] = {}
    legacy = aggregator.include_legacy_capabilities
    first_match = aggregator.first_match_options

    must_match = aggregator.must_match_options
    if must_match is not None:
        required = must_match.to_dict()
        if legacy:
            if aggregator.include_required_capabilities:
                payload[REQUIRED_CAPABILITIES] = required
            if not first_match:
                payload[DESIRED_CAPABILITIES] = required
        capabilities[ALWAYS_MATCH] = required

    if first_match:
        matches = [options.to_dict() for options in first_match]
        if legacy:
            payload[DESIRED_CAPABILITIES] = matches[0]
        capabilities[FIRST_MATCH] = matches

    for name, setting in aggregator.settings.items():
        payload[name] = serializable_object(setting)

    payload[CAPABILITIES] = capabilities

    logger.debug(
        f"Built payload: alwaysMatch={ALWAYS_MATCH in capabilities}, "
        f"firstMatch={len(first_match)}, settings={len(aggregator.settings)}, "
        f"legacy={legacy}"
    )
    return payload


def serialize_payload(payload: Payload, indent: bool = False) -> str:
    """Encode a payload as JSON text."""
    return oj.dumps(payload, indent=indent)
