"""
Capabilities.

Capability values and names, the flat capability store, and the typed
option sets that flatten into it.
"""

from wdsession.capabilities.values import (
    CapabilityType,
    CapabilityValue,
    is_wire_value,
)
from wdsession.capabilities.store import CapabilityStore
from wdsession.capabilities.options import (
    OptionSet,
    MergeConflictResult,
    PageLoadStrategy,
    UnhandledPromptBehavior,
    ProxyKind,
    Proxy,
    LogLevel,
    MERGE_CHECK_ORDER,
    make_option_set,
)
from wdsession.capabilities.browsers import (
    browser_options,
    chrome_options,
    firefox_options,
    edge_options,
    safari_options,
    internet_explorer_options,
)

__all__ = [
    # Values
    "CapabilityType",
    "CapabilityValue",
    "is_wire_value",
    # Store
    "CapabilityStore",
    # Options
    "OptionSet",
    "MergeConflictResult",
    "PageLoadStrategy",
    "UnhandledPromptBehavior",
    "ProxyKind",
    "Proxy",
    "LogLevel",
    "MERGE_CHECK_ORDER",
    "make_option_set",
    # Browsers
    "browser_options",
    "chrome_options",
    "firefox_options",
    "edge_options",
    "safari_options",
    "internet_explorer_options",
]
