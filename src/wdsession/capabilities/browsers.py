"""Browser-specific option sets.

Variants are plain option sets with a preset browser name and, where the
browser has a dedicated typed option, extra reserved capability names.
"""

from typing import Any

from wdsession.capabilities.options import OptionSet, make_option_set
from wdsession.capabilities.values import CapabilityType

CHROME = "chrome"
FIREFOX = "firefox"
EDGE = "MicrosoftEdge"
SAFARI = "safari"
INTERNET_EXPLORER = "internet explorer"

# Extra names each variant refuses as additional capabilities
BROWSER_RESERVED_NAMES: dict[str, frozenset[str]] = {
    EDGE: frozenset({CapabilityType.PAGE_LOAD_STRATEGY}),
}


def browser_options(browser_name: str, **fields: Any) -> OptionSet:
    """Create an option set for the named browser."""
    return make_option_set(
        browser_name=browser_name,
        reserved_names=BROWSER_RESERVED_NAMES.get(browser_name, frozenset()),
        **fields,
    )


def chrome_options(**fields: Any) -> OptionSet:
    return browser_options(CHROME, **fields)


def firefox_options(**fields: Any) -> OptionSet:
    return browser_options(FIREFOX, **fields)


def edge_options(**fields: Any) -> OptionSet:
    """Edge options; pageLoadStrategy may only be set through its typed field."""
    return browser_options(EDGE, **fields)


def safari_options(**fields: Any) -> OptionSet:
    return browser_options(SAFARI, **fields)


def internet_explorer_options(**fields: Any) -> OptionSet:
    return browser_options(INTERNET_EXPLORER, **fields)
