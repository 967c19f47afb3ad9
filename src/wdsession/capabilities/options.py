"""Option sets: typed bundles of capabilities for one browser configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from wdsession.capabilities.store import CapabilityStore
from wdsession.capabilities.values import CapabilityType, CapabilityValue
from wdsession.errors import InvalidArgumentError, NameCollisionError

logger = logging.getLogger(__name__)


class _WireEnum(Enum):
    """Enum whose value is its wire token; the empty token means unset."""

    @property
    def is_set(self) -> bool:
        return self.value != ""

    @property
    def wire_value(self) -> str | None:
        """Protocol token, or None when unset."""
        return self.value if self.is_set else None

    @classmethod
    def from_string(cls, value: str | None):
        """Parse a wire token or member name."""
        if value is None:
            return cls("")
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        try:
            return cls(value.lower())
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Invalid {cls.__name__}: {value}")


class PageLoadStrategy(_WireEnum):
    """How long navigation waits for the document to load."""

    UNSET = ""
    NORMAL = "normal"
    EAGER = "eager"
    NONE = "none"


class UnhandledPromptBehavior(_WireEnum):
    """What the remote end does with a user prompt nobody handled."""

    UNSET = ""
    DISMISS = "dismiss"
    ACCEPT = "accept"
    IGNORE = "ignore"
    DISMISS_AND_NOTIFY = "dismiss and notify"
    ACCEPT_AND_NOTIFY = "accept and notify"


class ProxyKind(_WireEnum):
    """Proxy configuration type."""

    UNSET = ""
    DIRECT = "direct"
    MANUAL = "manual"
    PAC = "pac"
    AUTODETECT = "autodetect"
    SYSTEM = "system"


class LogLevel(Enum):
    """Log levels accepted in logging preferences, least to most severe."""

    ALL = "ALL"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    SEVERE = "SEVERE"
    OFF = "OFF"

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Parse log level from string value."""
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}")


@dataclass
class Proxy:
    """
    Proxy configuration for the browser.

    Setting a manual host without a kind implies MANUAL; setting an
    autoconfig URL without a kind implies PAC.
    """

    proxy_type: ProxyKind = ProxyKind.UNSET
    http_proxy: str | None = None
    ssl_proxy: str | None = None
    ftp_proxy: str | None = None
    socks_proxy: str | None = None
    socks_version: int | None = None
    no_proxy: list[str] = field(default_factory=list)
    proxy_autoconfig_url: str | None = None

    @property
    def kind(self) -> ProxyKind:
        """Effective proxy kind."""
        if self.proxy_type.is_set:
            return self.proxy_type
        if any((self.http_proxy, self.ssl_proxy, self.ftp_proxy, self.socks_proxy)):
            return ProxyKind.MANUAL
        if self.proxy_autoconfig_url:
            return ProxyKind.PAC
        return ProxyKind.UNSET

    def to_dict(self) -> dict[str, Any]:
        """Convert to the W3C proxy object."""
        result: dict[str, Any] = {}
        kind = self.kind
        if kind.is_set:
            result["proxyType"] = kind.value
        if self.http_proxy:
            result["httpProxy"] = self.http_proxy
        if self.ssl_proxy:
            result["sslProxy"] = self.ssl_proxy
        if self.ftp_proxy:
            result["ftpProxy"] = self.ftp_proxy
        if self.socks_proxy:
            result["socksProxy"] = self.socks_proxy
        if self.socks_version is not None:
            result["socksVersion"] = self.socks_version
        if self.no_proxy:
            result["noProxy"] = list(self.no_proxy)
        if self.proxy_autoconfig_url:
            result["proxyAutoconfigUrl"] = self.proxy_autoconfig_url
        return result


@dataclass(frozen=True)
class MergeConflictResult:
    """Outcome of comparing two option sets for overlapping capabilities."""

    is_conflict: bool = False
    conflicting_field: str = ""

    @classmethod
    def none(cls) -> "MergeConflictResult":
        """No conflict."""
        return cls()

    def __bool__(self) -> bool:
        return self.is_conflict


# Wire name -> attribute name for the typed slots
_FIELD_ATTRIBUTES: dict[str, str] = {
    CapabilityType.BROWSER_NAME: "browser_name",
    CapabilityType.BROWSER_VERSION: "browser_version",
    CapabilityType.PLATFORM_NAME: "platform_name",
    CapabilityType.ACCEPT_INSECURE_CERTS: "accept_insecure_certificates",
    CapabilityType.UNHANDLED_PROMPT_BEHAVIOR: "unhandled_prompt_behavior",
    CapabilityType.PAGE_LOAD_STRATEGY: "page_load_strategy",
    CapabilityType.PROXY: "proxy",
    CapabilityType.LOGGING_PREFS: "logging_preferences",
}

# Checked in this order by try_merge(); the first conflict wins
MERGE_CHECK_ORDER: tuple[tuple[str, str], ...] = (
    ("BrowserName", "browser_name"),
    ("BrowserVersion", "browser_version"),
    ("PlatformName", "platform_name"),
    ("Proxy", "proxy"),
    ("UnhandledPromptBehavior", "unhandled_prompt_behavior"),
    ("PageLoadStrategy", "page_load_strategy"),
)


def _to_log_level(level: LogLevel | str) -> LogLevel:
    if isinstance(level, LogLevel):
        return level
    if not isinstance(level, str):
        raise ValueError(f"Invalid log level: {level!r}")
    return LogLevel.from_string(level)


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, _WireEnum):
        return value.is_set
    return True


@dataclass(eq=False)
class OptionSet:
    """
    A bundle of capabilities describing one acceptable browser configuration.

    Well-known capabilities live in typed fields. Anything else goes
    through add_additional_capability(), which refuses names that would
    shadow a typed field or a name reserved by the browser variant.

    Option sets compare by identity.
    """

    browser_name: str | None = None
    browser_version: str | None = None
    platform_name: str | None = None
    proxy: Proxy | None = None
    accept_insecure_certificates: bool | None = None
    unhandled_prompt_behavior: UnhandledPromptBehavior = UnhandledPromptBehavior.UNSET
    page_load_strategy: PageLoadStrategy = PageLoadStrategy.UNSET
    logging_preferences: dict[str, LogLevel] = field(default_factory=dict)
    reserved_names: frozenset[str] = field(default_factory=frozenset)
    _additional_capabilities: dict[str, CapabilityValue] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.reserved_names = frozenset(self.reserved_names)

    @property
    def known_names(self) -> frozenset[str]:
        """Names that cannot be set through add_additional_capability()."""
        return CapabilityType.KNOWN | self.reserved_names

    @property
    def additional_capabilities(self) -> Mapping[str, CapabilityValue]:
        """Read-only view of the additional capabilities."""
        return MappingProxyType(self._additional_capabilities)

    def set_field(self, name: str, value: Any) -> None:
        """
        Set a typed field by wire name or attribute name.

        Enum fields accept their wire token; logging preferences accept a
        mapping of log type to level. Passing None (or UNSET) clears the
        field.

        Raises:
            InvalidArgumentError: If name is not a typed field.
        """
        attribute = _FIELD_ATTRIBUTES.get(name, name)
        if attribute not in _FIELD_ATTRIBUTES.values():
            raise InvalidArgumentError("name", f"'{name}' is not a typed option field.")

        if attribute == "page_load_strategy" and not isinstance(value, PageLoadStrategy):
            value = PageLoadStrategy.from_string(value)
        elif attribute == "unhandled_prompt_behavior" and not isinstance(
            value, UnhandledPromptBehavior
        ):
            value = UnhandledPromptBehavior.from_string(value)
        elif attribute == "logging_preferences":
            prefs = {
                log_type: _to_log_level(level) for log_type, level in (value or {}).items()
            }
            self.logging_preferences = prefs
            return

        setattr(self, attribute, value)

    def set_logging_preference(self, log_type: str, level: LogLevel | str) -> None:
        """Set the level for one log type (browser, driver, performance...)."""
        self.logging_preferences[log_type] = _to_log_level(level)

    def add_additional_capability(self, name: str, value: CapabilityValue) -> None:
        """
        Add a capability that has no typed field.

        Adding a name that is already present overwrites the old value.

        Raises:
            InvalidArgumentError: If name is None or empty.
            NameCollisionError: If name is a typed field or reserved.
        """
        if not name:
            raise InvalidArgumentError(
                "name", "Capability name may not be None or an empty string."
            )
        if name in self.known_names:
            raise NameCollisionError(name)

        self._additional_capabilities[name] = value

    def remove_additional_capability(self, name: str) -> CapabilityValue:
        """Remove an additional capability and return its value."""
        return self._additional_capabilities.pop(name, None)

    def _logging_preferences_dict(self) -> dict[str, str] | None:
        if not self.logging_preferences:
            return None
        return {log_type: level.value for log_type, level in self.logging_preferences.items()}

    def to_capabilities(self) -> CapabilityStore:
        """
        Flatten into a capability store.

        Unset fields are omitted. Additional capability values are placed
        in the store as-is, not copied.
        """
        caps = CapabilityStore()

        if self.browser_name:
            caps.set_capability(CapabilityType.BROWSER_NAME, self.browser_name)
        if self.browser_version:
            caps.set_capability(CapabilityType.BROWSER_VERSION, self.browser_version)
        if self.platform_name:
            caps.set_capability(CapabilityType.PLATFORM_NAME, self.platform_name)
        if self.accept_insecure_certificates is not None:
            caps.set_capability(
                CapabilityType.ACCEPT_INSECURE_CERTS, self.accept_insecure_certificates
            )
        if self.page_load_strategy.is_set:
            caps.set_capability(
                CapabilityType.PAGE_LOAD_STRATEGY, self.page_load_strategy.wire_value
            )
        if self.unhandled_prompt_behavior.is_set:
            caps.set_capability(
                CapabilityType.UNHANDLED_PROMPT_BEHAVIOR,
                self.unhandled_prompt_behavior.wire_value,
            )
        if self.proxy is not None:
            caps.set_capability(CapabilityType.PROXY, self.proxy.to_dict())

        logging_prefs = self._logging_preferences_dict()
        if logging_prefs is not None:
            caps.set_capability(CapabilityType.LOGGING_PREFS, logging_prefs)

        for name, value in self._additional_capabilities.items():
            caps.set_capability(name, value)

        return caps

    def to_dict(self) -> dict[str, CapabilityValue]:
        """Flatten into a plain dict."""
        return self.to_capabilities().to_dict()

    def try_merge(self, other: "OptionSet") -> MergeConflictResult:
        """
        Check whether this option set and another claim the same typed field.

        Fields are checked in MERGE_CHECK_ORDER and the first field set on
        both sides is reported. Additional capabilities, accept-insecure
        and logging preferences are not compared.
        """
        for field_name, attribute in MERGE_CHECK_ORDER:
            if _is_set(getattr(self, attribute)) and _is_set(getattr(other, attribute)):
                logger.debug(f"Merge conflict on {field_name}")
                return MergeConflictResult(is_conflict=True, conflicting_field=field_name)

        return MergeConflictResult.none()

    def __str__(self) -> str:
        return (
            f"OptionSet(browser={self.browser_name or '-'}, "
            f"version={self.browser_version or '-'}, "
            f"platform={self.platform_name or '-'}, "
            f"extra={len(self._additional_capabilities)})"
        )


def make_option_set(
    browser_name: str | None = None,
    reserved_names: Iterable[str] = (),
    **fields: Any,
) -> OptionSet:
    """Create an option set, routing extra keyword fields through set_field()."""
    options = OptionSet(browser_name=browser_name, reserved_names=frozenset(reserved_names))
    for name, value in fields.items():
        options.set_field(name, value)
    return options
