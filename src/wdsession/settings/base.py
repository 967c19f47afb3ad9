"""Extension setting contract and validity checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from wdsession.capabilities.values import CapabilityValue, is_wire_value


@runtime_checkable
class ExtensionSetting(Protocol):
    """
    A named configuration block sent alongside the capabilities.

    Anything with a generate_serializable_object() method qualifies.
    The generated tree is checked each time it is needed; nothing is
    cached.
    """

    def generate_serializable_object(self) -> CapabilityValue:
        """Produce the value tree to embed in the payload."""
        ...


def serializable_object(setting: ExtensionSetting) -> Any:
    """Return the value tree for a setting."""
    return setting.generate_serializable_object()


def is_valid_setting(setting: ExtensionSetting) -> bool:
    """Check whether a setting's value tree can go over the wire."""
    return is_wire_value(setting.generate_serializable_object())


class SettingMixin:
    """Adds is_valid and serializable_object properties to a setting class."""

    @property
    def is_valid(self) -> bool:
        return is_valid_setting(self)  # type: ignore[arg-type]

    @property
    def serializable_object(self) -> Any:
        return serializable_object(self)  # type: ignore[arg-type]


@dataclass
class StaticSetting(SettingMixin):
    """Setting wrapping a literal value tree."""

    value: Any

    def generate_serializable_object(self) -> Any:
        return self.value
