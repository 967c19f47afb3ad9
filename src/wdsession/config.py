"""Remote end configuration loading."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wdsession.capabilities.options import OptionSet
from wdsession.lib import oj
from wdsession.session.aggregator import SessionAggregator
from wdsession.transport.types import (
    DEFAULT_COMMAND_TIMEOUT,
    TransportConfig,
)

logger = logging.getLogger(__name__)

# Config file locations
REMOTE_CONFIG_FILENAME = "remote.json"
GLOBAL_REMOTE_CONFIG = Path.home() / ".wdsession" / REMOTE_CONFIG_FILENAME
LOCAL_REMOTE_CONFIG_DIR = ".wdsession"


@dataclass
class RemoteEndConfig:
    """Configuration for a single remote end."""

    name: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    include_legacy_capabilities: bool = True

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "RemoteEndConfig":
        """Create from config dict."""
        return cls(
            name=name,
            url=data.get("url", ""),
            headers=data.get("headers", {}),
            command_timeout=float(data.get("commandTimeout", DEFAULT_COMMAND_TIMEOUT)),
            include_legacy_capabilities=bool(data.get("includeLegacyCapabilities", True)),
        )

    def to_transport_config(self) -> TransportConfig:
        """Build a transport config for this remote end."""
        return TransportConfig(
            url=self.url,
            command_timeout=self.command_timeout,
            headers=dict(self.headers),
        )

    def create_aggregator(
        self,
        must_match: OptionSet | None = None,
        *first_match: OptionSet,
    ) -> SessionAggregator:
        """
        Build a session aggregator for this remote end.

        Legacy capability output follows includeLegacyCapabilities.
        """
        return SessionAggregator(
            must_match,
            *first_match,
            include_legacy_capabilities=self.include_legacy_capabilities,
        )


def _load_file(path: Path, configs: dict[str, RemoteEndConfig]) -> None:
    try:
        data = oj.loads(path.read_bytes())
        remote_ends = data.get("remoteEnds", {})
        for name, end_data in remote_ends.items():
            if isinstance(end_data, dict) and end_data.get("url"):
                configs[name] = RemoteEndConfig.from_dict(name, end_data)
    except (OSError, ValueError, AttributeError) as e:
        logger.warning(f"Skipping unreadable remote config {path}: {e}")


def load_remote_config(working_dir: Path | None = None) -> dict[str, RemoteEndConfig]:
    """Load remote end configs from global and local config files.

    Global config (~/.wdsession/remote.json) is loaded first.
    Local config ({working_dir}/.wdsession/remote.json) overrides global.

    Returns:
        Dict mapping remote end name to config.
    """
    configs: dict[str, RemoteEndConfig] = {}

    if GLOBAL_REMOTE_CONFIG.exists():
        _load_file(GLOBAL_REMOTE_CONFIG, configs)

    if working_dir:
        local_config = working_dir / LOCAL_REMOTE_CONFIG_DIR / REMOTE_CONFIG_FILENAME
        if local_config.exists():
            _load_file(local_config, configs)

    return configs
