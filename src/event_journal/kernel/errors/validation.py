"""Validation errors: caller input rejected before any backend I/O."""

from __future__ import annotations

from typing import Any

from event_journal.kernel.errors.base import JournalError


class ValidationError(JournalError):
    """An argument does not meet the journal's input rules.

    ``argument`` names the offending parameter; ``value`` is its repr.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, argument: str, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, detail={"argument": argument, "value": repr(value)}, **kwargs)
        self.argument = argument
        self.value = value


class MissingEventNameError(ValidationError):
    default_code = "missing_event_name"

    def __init__(self, value: Any = None) -> None:
        super().__init__("Missing event name", argument="name", value=value)


class InvalidEventNameError(ValidationError):
    default_code = "invalid_event_name"

    def __init__(self, value: Any) -> None:
        super().__init__("Event name must be a string", argument="name", value=value)


class MissingRefError(ValidationError):
    default_code = "missing_ref"

    def __init__(self, value: Any = None) -> None:
        super().__init__("ref must be a non-empty string", argument="ref", value=value)


class InvalidRefError(ValidationError):
    """The ref does not match the backend's identifier format."""

    default_code = "invalid_ref"

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"Invalid ref {value!r}: {reason}", argument="ref", value=value)
        self.reason = reason


class InvalidVersionTypeError(ValidationError):
    default_code = "invalid_version_type"

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(f"{argument} must be a number", argument=argument, value=value)


class NegativeVersionError(ValidationError):
    default_code = "negative_version"

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(f"{argument} must be a positive number", argument=argument, value=value)


class NonIntegerVersionError(ValidationError):
    default_code = "non_integer_version"

    def __init__(self, argument: str, value: Any) -> None:
        super().__init__(f"{argument} must be an integer", argument=argument, value=value)


class PayloadIsFunctionError(ValidationError):
    default_code = "payload_is_function"

    def __init__(self, value: Any) -> None:
        super().__init__("payload cannot be a function", argument="payload", value=value)


class PayloadIsCustomObjectError(ValidationError):
    default_code = "payload_is_custom_object"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"payload cannot be a custom object ({type(value).__name__})",
            argument="payload",
            value=value,
        )


class RangeInvertedError(ValidationError):
    default_code = "range_inverted"

    def __init__(self, from_version: Any, to_version: Any) -> None:
        super().__init__(
            "to_version is less than from_version",
            argument="to_version",
            value=to_version,
        )
        self.detail["from_version"] = from_version
        self.from_version = from_version
        self.to_version = to_version


__all__ = [
    "InvalidEventNameError",
    "InvalidRefError",
    "InvalidVersionTypeError",
    "MissingEventNameError",
    "MissingRefError",
    "NegativeVersionError",
    "NonIntegerVersionError",
    "PayloadIsCustomObjectError",
    "PayloadIsFunctionError",
    "RangeInvertedError",
    "ValidationError",
]
