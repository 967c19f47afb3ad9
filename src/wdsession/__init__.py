"""
wdsession: new session requests for WebDriver remote ends.

Builds the payload of the "new session" command from typed option sets,
refusing conflicting capability requests before anything is sent, and
emits both the structured alwaysMatch/firstMatch form and the legacy
desiredCapabilities form.

Submodules:
- capabilities: Capability names, values, the capability store and option sets
- settings: Extension settings sent next to the capabilities
- session: Session aggregator and payload builder
- transport: HTTP transport to the remote end
- negotiation: Sending the payload and parsing the reply
- config: Remote end configuration files
"""

# Errors
from wdsession.errors import (
    SessionOptionsError,
    InvalidArgumentError,
    NameCollisionError,
    MergeConflictError,
    InvalidSettingError,
)

# Capabilities
from wdsession.capabilities import (
    CapabilityType,
    CapabilityValue,
    CapabilityStore,
    OptionSet,
    MergeConflictResult,
    PageLoadStrategy,
    UnhandledPromptBehavior,
    ProxyKind,
    Proxy,
    LogLevel,
    is_wire_value,
    chrome_options,
    firefox_options,
    edge_options,
    safari_options,
    internet_explorer_options,
)

# Settings
from wdsession.settings import (
    ExtensionSetting,
    StaticSetting,
    CloudProviderSetting,
    GridSetting,
    is_valid_setting,
)

# Session
from wdsession.session import (
    SessionAggregator,
    build_payload,
    serialize_payload,
)

# Transport
from wdsession.transport import (
    HTTPTransport,
    TransportConfig,
    Transport,
    TransportError,
    SessionNotCreatedError,
)

# Negotiation
from wdsession.negotiation import (
    Dialect,
    NewSessionResult,
    SessionNegotiator,
    create_remote_session,
)

# Config
from wdsession.config import RemoteEndConfig, load_remote_config

__all__ = [
    # Errors
    "SessionOptionsError",
    "InvalidArgumentError",
    "NameCollisionError",
    "MergeConflictError",
    "InvalidSettingError",
    # Capabilities
    "CapabilityType",
    "CapabilityValue",
    "CapabilityStore",
    "OptionSet",
    "MergeConflictResult",
    "PageLoadStrategy",
    "UnhandledPromptBehavior",
    "ProxyKind",
    "Proxy",
    "LogLevel",
    "is_wire_value",
    "chrome_options",
    "firefox_options",
    "edge_options",
    "safari_options",
    "internet_explorer_options",
    # Settings
    "ExtensionSetting",
    "StaticSetting",
    "CloudProviderSetting",
    "GridSetting",
    "is_valid_setting",
    # Session
    "SessionAggregator",
    "build_payload",
    "serialize_payload",
    # Transport
    "HTTPTransport",
    "TransportConfig",
    "Transport",
    "TransportError",
    "SessionNotCreatedError",
    # Negotiation
    "Dialect",
    "NewSessionResult",
    "SessionNegotiator",
    "create_remote_session",
    # Config
    "RemoteEndConfig",
    "load_remote_config",
]
