"""Caller-correction errors raised while building a session request.

None of these are transient. Each is raised synchronously by the mutating
call that detected the problem, before any network traffic, and the object
being mutated is left exactly as it was.
"""

from typing import Any

# Error codes
INVALID_ARGUMENT = "invalid argument"
NAME_COLLISION = "name collision"
MERGE_CONFLICT = "merge conflict"
INVALID_SETTING = "invalid setting"


class SessionOptionsError(ValueError):
    """
    Base class for session option errors.

    Carries a stable error code and optional structured data so callers
    can report the failure without parsing the message.
    """

    code: str = INVALID_ARGUMENT

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain error object."""
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.data is not None:
            error["data"] = self.data
        return error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, data={self.data})"


class InvalidArgumentError(SessionOptionsError):
    """An argument was empty or missing."""

    code = INVALID_ARGUMENT

    def __init__(self, argument: str, message: str):
        super().__init__(message, data={"argument": argument})
        self.argument = argument


class NameCollisionError(SessionOptionsError):
    """An additional capability would shadow a typed or reserved field."""

    code = NAME_COLLISION

    def __init__(self, name: str):
        super().__init__(
            f"There is already an option for the {name} capability. "
            "Please use that instead.",
            data={"name": name},
        )
        self.name = name


class MergeConflictError(SessionOptionsError):
    """
    A capability is claimed by both the must-match and a first-match option set.

    ``index`` is the position of the first-match option set that conflicted
    when the must-match set was being replaced; it is None when a new
    first-match set was being added.
    """

    code = MERGE_CONFLICT

    def __init__(self, field_name: str, index: int | None = None):
        if index is None:
            message = (
                "You cannot request the same capability in both must-match and "
                "first-match capabilities. You are attempting to add a first-match "
                f"options object that defines a capability, '{field_name}', that is "
                "already defined in the must-match options."
            )
            data: dict[str, Any] = {"field": field_name}
        else:
            message = (
                "You cannot request the same capability in both must-match and "
                "first-match capabilities. You are attempting to add a must-match "
                f"options object that defines a capability, '{field_name}', that is "
                f"already defined in the first-match options with index {index}."
            )
            data = {"field": field_name, "index": index}
        super().__init__(message, data=data)
        self.field_name = field_name
        self.index = index


class InvalidSettingError(SessionOptionsError):
    """An extension setting produced a value that cannot go over the wire."""

    code = INVALID_SETTING

    def __init__(self, name: str):
        super().__init__(
            f"Setting '{name}' cannot be serialized to a JSON payload.",
            data={"name": name},
        )
        self.name = name
