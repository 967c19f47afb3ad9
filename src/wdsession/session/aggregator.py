"""Session aggregator: must-match and first-match option sets plus extension settings."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from wdsession.capabilities.options import OptionSet
from wdsession.errors import (
    InvalidArgumentError,
    InvalidSettingError,
    MergeConflictError,
)
from wdsession.session.payload import Payload, build_payload
from wdsession.settings.base import ExtensionSetting, is_valid_setting

logger = logging.getLogger(__name__)


class SessionAggregator:
    """
    Collects everything that goes into a new session request.

    Holds at most one must-match option set, an ordered list of
    first-match option sets, and named extension settings. Every mutation
    is checked before it is applied: a failed call leaves the aggregator
    untouched.

    The must-match set is compared against each first-match set using
    OptionSet.try_merge(). First-match sets are never compared with each
    other.

    Option sets are held by reference and flattened only when the payload
    is built, so changes made to an option set after adding it show up in
    the payload (and are not re-checked for conflicts).
    """

    def __init__(
        self,
        must_match: OptionSet | None = None,
        *first_match: OptionSet,
        include_legacy_capabilities: bool = True,
        include_required_capabilities: bool = False,
    ):
        """
        Initialize the aggregator.

        Args:
            must_match: Options every session must satisfy.
            *first_match: Alternative option sets, in preference order.
            include_legacy_capabilities: Also emit desiredCapabilities for
                remote ends speaking the older protocol.
            include_required_capabilities: With legacy output on, also emit
                requiredCapabilities for the must-match set.
        """
        self.include_legacy_capabilities = include_legacy_capabilities
        self.include_required_capabilities = include_required_capabilities
        self._must_match: OptionSet | None = None
        self._first_match: list[OptionSet] = []
        self._settings: dict[str, ExtensionSetting] = {}

        if must_match is not None:
            self.set_must_match_options(must_match)
        for options in first_match:
            self.add_first_match_options(options)

    @classmethod
    def from_options(cls, options: OptionSet, **kwargs: Any) -> "SessionAggregator":
        """
        Create an aggregator for a single option set.

        The options become the only first-match entry.

        Raises:
            InvalidArgumentError: If options is None.
        """
        if options is None:
            raise InvalidArgumentError("options", "Options cannot be None.")
        aggregator = cls(**kwargs)
        aggregator.add_first_match_options(options)
        return aggregator

    @property
    def must_match_options(self) -> OptionSet | None:
        """The must-match option set, if any."""
        return self._must_match

    @property
    def first_match_options(self) -> tuple[OptionSet, ...]:
        """First-match option sets in insertion order."""
        return tuple(self._first_match)

    @property
    def settings(self) -> Mapping[str, ExtensionSetting]:
        """Read-only view of extension settings in insertion order."""
        return MappingProxyType(self._settings)

    def get_setting(self, name: str) -> ExtensionSetting | None:
        """Get a setting by name."""
        return self._settings.get(name)

    def add_first_match_options(self, options: OptionSet) -> None:
        """
        Append an alternative option set.

        Raises:
            InvalidArgumentError: If options is None.
            MergeConflictError: If options sets a typed field that the
                must-match set also sets.
        """
        if options is None:
            raise InvalidArgumentError("options", "Options cannot be None.")

        if self._must_match is not None:
            result = self._must_match.try_merge(options)
            if result.is_conflict:
                logger.warning(
                    f"Rejected first-match options: {result.conflicting_field} "
                    "already set in must-match options"
                )
                raise MergeConflictError(result.conflicting_field)

        self._first_match.append(options)
        logger.debug(f"Added first-match options #{len(self._first_match) - 1}: {options}")

    def set_must_match_options(self, options: OptionSet) -> None:
        """
        Set or replace the must-match option set.

        Each existing first-match set is checked in order; the first
        conflict aborts the call.

        Raises:
            InvalidArgumentError: If options is None.
            MergeConflictError: With the index of the conflicting
                first-match set.
        """
        if options is None:
            raise InvalidArgumentError("options", "Options cannot be None.")

        for index, first_match in enumerate(self._first_match):
            result = first_match.try_merge(options)
            if result.is_conflict:
                logger.warning(
                    f"Rejected must-match options: {result.conflicting_field} "
                    f"already set in first-match options #{index}"
                )
                raise MergeConflictError(result.conflicting_field, index)

        replaced = self._must_match is not None
        self._must_match = options
        logger.debug(f"{'Replaced' if replaced else 'Set'} must-match options: {options}")

    def add_setting(self, name: str, setting: ExtensionSetting) -> None:
        """
        Add or overwrite a named extension setting.

        Raises:
            InvalidArgumentError: If name is empty or setting is missing.
            InvalidSettingError: If the setting's value tree cannot be
                serialized.
        """
        if not name:
            raise InvalidArgumentError("name", "Setting name must not be None or empty.")

        if setting is None:
            raise InvalidArgumentError("setting", "Setting must not be None.")

        if not isinstance(setting, ExtensionSetting):
            raise InvalidArgumentError(
                "setting",
                f"Setting must provide generate_serializable_object(), "
                f"got {type(setting).__name__}.",
            )

        if not is_valid_setting(setting):
            logger.warning(f"Rejected setting '{name}': value is not serializable")
            raise InvalidSettingError(name)

        if name in self._settings:
            logger.debug(f"Overwriting setting '{name}'")
        self._settings[name] = setting

    def to_payload(self) -> Payload:
        """Build the new session payload."""
        return build_payload(self)

    def __repr__(self) -> str:
        return (
            f"SessionAggregator(must_match={self._must_match is not None}, "
            f"first_match={len(self._first_match)}, "
            f"settings={list(self._settings)}, "
            f"legacy={self.include_legacy_capabilities})"
        )
