"""Ready-made settings for common remote ends."""

from dataclasses import dataclass
from typing import Any

from wdsession.settings.base import SettingMixin


@dataclass
class CloudProviderSetting(SettingMixin):
    """
    Account and machine settings for a hosted browser grid.

    The platform here can be more precise than platformName, e.g. an
    exact operating system release for the virtual machine.
    """

    user_name: str | None = None
    access_token: str | None = None
    vm_platform: str | None = None

    def generate_serializable_object(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.user_name:
            settings["userName"] = self.user_name
        if self.access_token:
            settings["token"] = self.access_token
        if self.vm_platform:
            settings["platform"] = self.vm_platform
        return settings


@dataclass
class GridSetting(SettingMixin):
    """Driver executable locations for a self-hosted grid node."""

    ie_driver_path: str | None = None
    gecko_driver_path: str | None = None
    chrome_driver_path: str | None = None

    def generate_serializable_object(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.ie_driver_path:
            settings["webdriver.ie.driver"] = self.ie_driver_path
        if self.gecko_driver_path:
            settings["webdriver.gecko.driver"] = self.gecko_driver_path
        if self.chrome_driver_path:
            settings["webdriver.chrome.driver"] = self.chrome_driver_path
        return settings
