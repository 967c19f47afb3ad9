"""Capability names and wire-value checks."""

from __future__ import annotations

from typing import Any, Union

CapabilityValue = Union[
    str,
    bool,
    int,
    float,
    None,
    list["CapabilityValue"],
    tuple["CapabilityValue", ...],
    dict[str, "CapabilityValue"],
]
"""Any value that can be embedded in a new session payload."""


class CapabilityType:
    """Wire names of the well-known capabilities."""

    BROWSER_NAME = "browserName"
    BROWSER_VERSION = "browserVersion"
    PLATFORM_NAME = "platformName"
    ACCEPT_INSECURE_CERTS = "acceptInsecureCerts"
    UNHANDLED_PROMPT_BEHAVIOR = "unhandledPromptBehavior"
    PAGE_LOAD_STRATEGY = "pageLoadStrategy"
    PROXY = "proxy"
    LOGGING_PREFS = "loggingPrefs"

    KNOWN: frozenset[str] = frozenset(
        {
            BROWSER_NAME,
            BROWSER_VERSION,
            PLATFORM_NAME,
            ACCEPT_INSECURE_CERTS,
            UNHANDLED_PROMPT_BEHAVIOR,
            PAGE_LOAD_STRATEGY,
            PROXY,
            LOGGING_PREFS,
        }
    )


# Integer range the wire codec can encode: signed or unsigned 64-bit
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


def is_wire_value(value: Any) -> bool:
    """
    Check whether a value tree can be serialized into the payload.

    Leaves may be strings, 64-bit integers, floats, booleans or None.
    Containers may be dicts with string keys, lists or plain tuples,
    checked recursively. Any other node rejects the whole tree.

    Args:
        value: The root of the tree to check.

    Returns:
        True if every node is representable.
    """
    return _check(value, set())


def _check(value: Any, active: set[int]) -> bool:
    if value is None or isinstance(value, bool) or type(value) is float:
        return True

    if isinstance(value, str):
        return _is_utf8(value)

    if isinstance(value, int):
        return _INT_MIN <= value <= _INT_MAX

    if isinstance(value, dict):
        if id(value) in active:
            return False
        active.add(id(value))
        try:
            for key, item in value.items():
                if not isinstance(key, str) or not _is_utf8(key):
                    return False
                if not _check(item, active):
                    return False
        finally:
            active.discard(id(value))
        return True

    if isinstance(value, list) or type(value) is tuple:
        if id(value) in active:
            return False
        active.add(id(value))
        try:
            return all(_check(item, active) for item in value)
        finally:
            active.discard(id(value))

    return False


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
