"""Root error class for the event-journal error hierarchy."""

from __future__ import annotations

import json
from typing import Any


def _rebuild(cls: type[JournalError], message: str, state: dict[str, Any]) -> JournalError:
    error = cls.__new__(cls)
    Exception.__init__(error, message)
    error.__dict__.update(state)
    if error.cause is not None:
        error.__cause__ = error.cause
    return error


class JournalError(Exception):
    """Root of the error hierarchy.

    Every journal error carries a machine-readable ``code`` and a ``detail``
    dict with the context a caller needs to react (the ref, the versions
    involved, the offending argument).  Subclasses take their own positional
    arguments, so pickling goes through :func:`_rebuild` instead of
    ``cls(*args)``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context (ref, versions, argument values, ...).
        cause: Original exception that triggered this error.
    """

    default_code: str = "journal_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return _rebuild, (type(self), self.message, dict(self.__dict__))

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict, suitable as structured log fields."""
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["JournalError"]
