"""
Extension settings.

Named, vendor-specific configuration blocks that travel next to the
capabilities in a new session request.
"""

from wdsession.settings.base import (
    ExtensionSetting,
    SettingMixin,
    StaticSetting,
    is_valid_setting,
    serializable_object,
)
from wdsession.settings.providers import CloudProviderSetting, GridSetting

__all__ = [
    "ExtensionSetting",
    "SettingMixin",
    "StaticSetting",
    "is_valid_setting",
    "serializable_object",
    "CloudProviderSetting",
    "GridSetting",
]
