"""Pytest configuration and fixtures."""

import pytest

from wdsession.capabilities import (
    OptionSet,
    Proxy,
    firefox_options,
    chrome_options,
    internet_explorer_options,
)
from wdsession.transport import TransportConfig

# Enable async tests without marking each one
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def required_options():
    """Must-match options: platform plus a manual proxy."""
    options = OptionSet()
    options.platform_name = "windows"
    options.proxy = Proxy(http_proxy="http://proxylocation:8080")
    return options


@pytest.fixture
def firefox():
    options = firefox_options()
    options.browser_version = "52"
    options.accept_insecure_certificates = True
    options.add_additional_capability("moz:firefoxOptions", {"prefs": {"my.pref": 1}})
    return options


@pytest.fixture
def chrome():
    options = chrome_options()
    options.add_additional_capability(
        "goog:chromeOptions", {"args": ["--ignore-browser-security"]}
    )
    return options


@pytest.fixture
def internet_explorer():
    options = internet_explorer_options()
    options.add_additional_capability("se:ieOptions", {"requireWindowFocus": True})
    return options


@pytest.fixture
def transport_config():
    return TransportConfig(url="http://grid.example.com:4444/wd/hub")


@pytest.fixture
def w3c_response():
    """New session response body from a W3C remote end."""
    return {
        "value": {
            "sessionId": "1f3c5d7e",
            "capabilities": {
                "browserName": "firefox",
                "browserVersion": "52.0",
                "platformName": "windows",
            },
        }
    }
