"""Application journal – argument checks run before any adapter call."""

from __future__ import annotations

import numbers
from collections import OrderedDict
from typing import Any

from event_journal.kernel.errors import (
    InvalidEventNameError,
    InvalidVersionTypeError,
    MissingEventNameError,
    MissingRefError,
    NegativeVersionError,
    NonIntegerVersionError,
    PayloadIsCustomObjectError,
    PayloadIsFunctionError,
    RangeInvertedError,
)

# Matched on the exact type, so subclasses such as named tuples and enums are
# custom objects. OrderedDict is the one subclass accepted as a plain mapping.
_PLAIN_PAYLOAD_TYPES = frozenset({str, bytes, bool, int, float, list, tuple, dict, OrderedDict})


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_event_name(name: Any) -> str:
    if name is None or name == "":
        raise MissingEventNameError(name)
    if not isinstance(name, str):
        raise InvalidEventNameError(name)
    return name


def check_ref(ref: Any) -> str:
    if not isinstance(ref, str) or not ref:
        raise MissingRefError(ref)
    return ref


def check_expected_version(value: Any) -> int | None:
    """Return *value* as an ``int`` (or ``None`` when omitted)."""
    if value is None:
        return None
    if not _is_number(value):
        raise InvalidVersionTypeError("expected_version", value)
    if value < 0:
        raise NegativeVersionError("expected_version", value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise NonIntegerVersionError("expected_version", value)
    return int(value)


def check_payload(payload: Any) -> Any:
    if payload is None:
        return None
    if callable(payload):
        raise PayloadIsFunctionError(payload)
    if type(payload) not in _PLAIN_PAYLOAD_TYPES:
        raise PayloadIsCustomObjectError(payload)
    return payload


def check_range(from_version: Any, to_version: Any) -> None:
    if from_version is not None and not _is_number(from_version):
        raise InvalidVersionTypeError("from_version", from_version)
    if to_version is not None and not _is_number(to_version):
        raise InvalidVersionTypeError("to_version", to_version)
    if from_version is not None and to_version is not None and from_version > to_version:
        raise RangeInvertedError(from_version, to_version)


__all__ = [
    "check_event_name",
    "check_expected_version",
    "check_payload",
    "check_range",
    "check_ref",
]
