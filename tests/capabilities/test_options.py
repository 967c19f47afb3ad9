"""Tests for option sets, their flattening and merge checks."""

import pytest

from wdsession.capabilities import (
    LogLevel,
    MERGE_CHECK_ORDER,
    MergeConflictResult,
    OptionSet,
    PageLoadStrategy,
    Proxy,
    ProxyKind,
    UnhandledPromptBehavior,
    edge_options,
    firefox_options,
    make_option_set,
    safari_options,
)
from wdsession.errors import InvalidArgumentError, NameCollisionError


class TestEnums:
    """Tests for wire-token enums."""

    def test_page_load_strategy_tokens(self):
        assert PageLoadStrategy.NORMAL.wire_value == "normal"
        assert PageLoadStrategy.EAGER.wire_value == "eager"
        assert PageLoadStrategy.NONE.wire_value == "none"
        assert PageLoadStrategy.UNSET.wire_value is None

    def test_unhandled_prompt_tokens(self):
        assert [b.wire_value for b in UnhandledPromptBehavior if b.is_set] == [
            "dismiss",
            "accept",
            "ignore",
            "dismiss and notify",
            "accept and notify",
        ]

    def test_from_string_accepts_token_and_name(self):
        assert UnhandledPromptBehavior.from_string("accept and notify") is (
            UnhandledPromptBehavior.ACCEPT_AND_NOTIFY
        )
        assert UnhandledPromptBehavior.from_string("DISMISS_AND_NOTIFY") is (
            UnhandledPromptBehavior.DISMISS_AND_NOTIFY
        )
        assert PageLoadStrategy.from_string("Eager") is PageLoadStrategy.EAGER
        assert PageLoadStrategy.from_string(None) is PageLoadStrategy.UNSET

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Invalid PageLoadStrategy"):
            PageLoadStrategy.from_string("lazy")

    def test_from_string_non_string(self):
        with pytest.raises(ValueError, match="Invalid UnhandledPromptBehavior"):
            UnhandledPromptBehavior.from_string(3)

    def test_log_level_from_string(self):
        assert LogLevel.from_string("severe") is LogLevel.SEVERE
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.from_string("loud")


class TestProxy:
    """Tests for the proxy object."""

    def test_manual_implied_by_host(self):
        proxy = Proxy(http_proxy="proxy:8080", no_proxy=["localhost"])
        assert proxy.to_dict() == {
            "proxyType": "manual",
            "httpProxy": "proxy:8080",
            "noProxy": ["localhost"],
        }

    def test_pac_implied_by_autoconfig_url(self):
        proxy = Proxy(proxy_autoconfig_url="http://example.com/proxy.pac")
        assert proxy.to_dict() == {
            "proxyType": "pac",
            "proxyAutoconfigUrl": "http://example.com/proxy.pac",
        }

    def test_explicit_kind(self):
        assert Proxy(proxy_type=ProxyKind.SYSTEM).to_dict() == {"proxyType": "system"}

    def test_socks(self):
        proxy = Proxy(socks_proxy="socks:1080", socks_version=5)
        assert proxy.to_dict() == {
            "proxyType": "manual",
            "socksProxy": "socks:1080",
            "socksVersion": 5,
        }

    def test_empty(self):
        assert Proxy().to_dict() == {}


class TestAdditionalCapabilities:
    """Tests for add_additional_capability()."""

    def test_add_and_overwrite(self):
        options = OptionSet()
        options.add_additional_capability("custom:thing", "one")
        options.add_additional_capability("custom:thing", "two")
        assert options.additional_capabilities == {"custom:thing": "two"}

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_name_rejected(self, name):
        options = OptionSet()
        with pytest.raises(InvalidArgumentError):
            options.add_additional_capability(name, "value")
        assert options.additional_capabilities == {}

    @pytest.mark.parametrize(
        "name",
        ["browserName", "platformName", "proxy", "pageLoadStrategy", "loggingPrefs"],
    )
    def test_known_name_rejected(self, name):
        options = OptionSet()
        with pytest.raises(NameCollisionError) as exc_info:
            options.add_additional_capability(name, "value")
        assert exc_info.value.name == name
        assert name not in options.additional_capabilities

    def test_variant_reserved_name_rejected(self):
        options = OptionSet(reserved_names={"vendor:typed"})
        with pytest.raises(NameCollisionError):
            options.add_additional_capability("vendor:typed", 1)
        assert "vendor:typed" in options.known_names

    def test_view_is_read_only(self):
        options = OptionSet()
        with pytest.raises(TypeError):
            options.additional_capabilities["x"] = 1

    def test_remove(self):
        options = OptionSet()
        options.add_additional_capability("x", 1)
        assert options.remove_additional_capability("x") == 1
        assert options.remove_additional_capability("x") is None


class TestSetField:
    """Tests for set_field()."""

    def test_by_wire_name(self):
        options = OptionSet()
        options.set_field("browserVersion", "52")
        options.set_field("pageLoadStrategy", "eager")
        options.set_field("unhandledPromptBehavior", "dismiss and notify")
        assert options.browser_version == "52"
        assert options.page_load_strategy is PageLoadStrategy.EAGER
        assert options.unhandled_prompt_behavior is UnhandledPromptBehavior.DISMISS_AND_NOTIFY

    def test_by_attribute_name(self):
        options = OptionSet()
        options.set_field("platform_name", "linux")
        assert options.platform_name == "linux"

    def test_overwrites_and_clears(self):
        options = OptionSet(platform_name="windows")
        options.set_field("platformName", "mac")
        assert options.platform_name == "mac"
        options.set_field("platformName", None)
        assert options.platform_name is None
        options.set_field("pageLoadStrategy", PageLoadStrategy.NONE)
        options.set_field("pageLoadStrategy", None)
        assert options.page_load_strategy is PageLoadStrategy.UNSET

    def test_logging_preferences(self):
        options = OptionSet()
        options.set_field("loggingPrefs", {"browser": "severe", "driver": LogLevel.ALL})
        assert options.logging_preferences == {
            "browser": LogLevel.SEVERE,
            "driver": LogLevel.ALL,
        }

    def test_bad_logging_level_leaves_preferences_unchanged(self):
        options = OptionSet()
        options.set_logging_preference("browser", LogLevel.INFO)
        with pytest.raises(ValueError, match="Invalid log level"):
            options.set_field("loggingPrefs", {"driver": "ALL", "performance": "bogus"})
        assert options.logging_preferences == {"browser": LogLevel.INFO}

    def test_non_string_enum_value_rejected(self):
        options = OptionSet(page_load_strategy=PageLoadStrategy.EAGER)
        with pytest.raises(ValueError, match="Invalid PageLoadStrategy"):
            options.set_field("pageLoadStrategy", 1)
        assert options.page_load_strategy is PageLoadStrategy.EAGER

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidArgumentError, match="not a typed option field"):
            OptionSet().set_field("custom:thing", 1)

    def test_make_option_set(self):
        options = make_option_set("firefox", browserVersion="60", pageLoadStrategy="none")
        assert options.browser_name == "firefox"
        assert options.browser_version == "60"
        assert options.page_load_strategy is PageLoadStrategy.NONE


class TestToCapabilities:
    """Tests for flattening option sets."""

    def test_empty_options_flatten_to_nothing(self):
        assert OptionSet().to_dict() == {}

    def test_all_fields(self):
        options = OptionSet(
            browser_name="firefox",
            browser_version="52",
            platform_name="windows",
            accept_insecure_certificates=False,
            page_load_strategy=PageLoadStrategy.EAGER,
            unhandled_prompt_behavior=UnhandledPromptBehavior.ACCEPT_AND_NOTIFY,
            proxy=Proxy(proxy_type=ProxyKind.DIRECT),
        )
        options.set_logging_preference("browser", LogLevel.WARNING)
        options.add_additional_capability("moz:debuggerAddress", True)

        assert options.to_dict() == {
            "browserName": "firefox",
            "browserVersion": "52",
            "platformName": "windows",
            "acceptInsecureCerts": False,
            "pageLoadStrategy": "eager",
            "unhandledPromptBehavior": "accept and notify",
            "proxy": {"proxyType": "direct"},
            "loggingPrefs": {"browser": "WARNING"},
            "moz:debuggerAddress": True,
        }

    def test_empty_strings_omitted(self):
        options = OptionSet(browser_name="", browser_version="", platform_name="")
        assert options.to_dict() == {}

    def test_accept_insecure_only_when_set(self):
        assert "acceptInsecureCerts" not in OptionSet().to_dict()
        assert OptionSet(accept_insecure_certificates=True).to_dict() == {
            "acceptInsecureCerts": True
        }

    def test_additional_values_are_not_copied(self):
        value = {"args": []}
        options = OptionSet()
        options.add_additional_capability("goog:chromeOptions", value)
        value["args"].append("--headless")
        assert options.to_dict()["goog:chromeOptions"] == {"args": ["--headless"]}

    def test_each_flatten_is_a_fresh_store(self):
        options = OptionSet(browser_name="chrome")
        first = options.to_capabilities()
        first.set_capability("extra", 1)
        assert "extra" not in options.to_capabilities()


class TestTryMerge:
    """Tests for merge conflict detection."""

    def test_disjoint_fields_do_not_conflict_either_way(self):
        left = OptionSet(platform_name="windows", proxy=Proxy(http_proxy="p:1"))
        right = OptionSet(browser_name="firefox", browser_version="52")
        assert not left.try_merge(right)
        assert not right.try_merge(left)
        assert left.try_merge(right) == MergeConflictResult.none()

    @pytest.mark.parametrize(
        "field_name, attribute, value",
        [
            ("BrowserName", "browser_name", "chrome"),
            ("BrowserVersion", "browser_version", "60"),
            ("PlatformName", "platform_name", "linux"),
            ("Proxy", "proxy", Proxy(proxy_type=ProxyKind.SYSTEM)),
            ("UnhandledPromptBehavior", "unhandled_prompt_behavior", UnhandledPromptBehavior.ACCEPT),
            ("PageLoadStrategy", "page_load_strategy", PageLoadStrategy.NONE),
        ],
    )
    def test_same_field_conflicts(self, field_name, attribute, value):
        left = OptionSet()
        right = OptionSet()
        setattr(left, attribute, value)
        setattr(right, attribute, value)

        result = left.try_merge(right)
        assert result.is_conflict
        assert result.conflicting_field == field_name

    def test_different_values_still_conflict(self):
        result = OptionSet(browser_version="52").try_merge(OptionSet(browser_version="60"))
        assert result == MergeConflictResult(True, "BrowserVersion")

    def test_first_field_in_order_wins(self):
        left = OptionSet(
            platform_name="windows",
            page_load_strategy=PageLoadStrategy.EAGER,
            browser_version="1",
        )
        right = OptionSet(
            platform_name="linux",
            page_load_strategy=PageLoadStrategy.NORMAL,
            browser_version="2",
        )
        assert left.try_merge(right).conflicting_field == "BrowserVersion"

    def test_check_order(self):
        assert [name for name, _ in MERGE_CHECK_ORDER] == [
            "BrowserName",
            "BrowserVersion",
            "PlatformName",
            "Proxy",
            "UnhandledPromptBehavior",
            "PageLoadStrategy",
        ]

    def test_cleared_field_does_not_conflict(self):
        left = OptionSet(platform_name="windows")
        right = OptionSet(platform_name="windows")
        right.platform_name = None
        assert not left.try_merge(right)

    def test_unset_enum_does_not_conflict(self):
        left = OptionSet(page_load_strategy=PageLoadStrategy.EAGER)
        right = OptionSet(page_load_strategy=PageLoadStrategy.UNSET)
        assert not left.try_merge(right)

    def test_unchecked_fields_never_conflict(self):
        left = OptionSet(accept_insecure_certificates=True)
        right = OptionSet(accept_insecure_certificates=False)
        left.set_logging_preference("browser", LogLevel.ALL)
        right.set_logging_preference("browser", LogLevel.OFF)
        left.add_additional_capability("shared:name", 1)
        right.add_additional_capability("shared:name", 2)
        assert not left.try_merge(right)


class TestBrowserVariants:
    """Tests for browser-specific option sets."""

    def test_browser_names(self):
        assert firefox_options().browser_name == "firefox"
        assert safari_options().browser_name == "safari"
        assert edge_options().browser_name == "MicrosoftEdge"

    def test_edge_reserves_page_load_strategy(self):
        options = edge_options()
        assert "pageLoadStrategy" in options.reserved_names
        with pytest.raises(NameCollisionError):
            options.add_additional_capability("pageLoadStrategy", "eager")

    def test_edge_accepts_other_names(self):
        options = edge_options()
        options.add_additional_capability("ms:edgeOptions", {"args": []})
        assert options.to_dict() == {
            "browserName": "MicrosoftEdge",
            "ms:edgeOptions": {"args": []},
        }

    def test_fields_passed_through(self):
        options = safari_options(platformName="mac")
        assert options.platform_name == "mac"

    def test_variant_identity_comparison(self):
        assert firefox_options() != firefox_options()
