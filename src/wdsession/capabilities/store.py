"""Capability store: the flat name -> value map exchanged between components."""

from __future__ import annotations

from typing import Any, Iterator

from wdsession.capabilities.values import CapabilityType, CapabilityValue


class CapabilityStore:
    """
    Mutable mapping of capability name to value.

    Names are unique and insertion order is kept so that the serialized
    payload is stable.
    """

    def __init__(self, raw: dict[str, CapabilityValue] | None = None):
        self._capabilities: dict[str, CapabilityValue] = {}
        if raw is not None:
            for name, value in raw.items():
                self.set_capability(name, value)

    @classmethod
    def from_dict(cls, raw: dict[str, CapabilityValue] | None) -> "CapabilityStore":
        """Create from a plain dict."""
        return cls(raw)

    @property
    def browser_name(self) -> str:
        """Browser name, or empty string when not set."""
        value = self._capabilities.get(CapabilityType.BROWSER_NAME)
        return "" if value is None else str(value)

    def set_capability(self, name: str, value: CapabilityValue) -> None:
        """Set a capability, overwriting any previous value."""
        self._capabilities[name] = value

    def get_capability(self, name: str, default: Any = None) -> Any:
        """Get a capability value, or default if absent."""
        return self._capabilities.get(name, default)

    def has_capability(self, name: str) -> bool:
        """Check if a capability is present."""
        return name in self._capabilities

    def to_dict(self) -> dict[str, CapabilityValue]:
        """
        Return the underlying dict.

        This is the live map, not a copy: later writes through
        set_capability() are visible through the returned dict.
        """
        return self._capabilities

    def copy(self) -> "CapabilityStore":
        """Shallow copy."""
        return CapabilityStore(dict(self._capabilities))

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)

    def __iter__(self) -> Iterator[str]:
        return iter(self._capabilities)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CapabilityStore):
            return self._capabilities == other._capabilities
        if isinstance(other, dict):
            return self._capabilities == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CapabilityStore({self._capabilities!r})"

    def __str__(self) -> str:
        return f"Capabilities [BrowserName={self.browser_name}]"
