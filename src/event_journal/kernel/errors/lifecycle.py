"""Lifecycle errors: adapter selection and client connection state."""

from __future__ import annotations

from typing import Any, Iterable

from event_journal.kernel.errors.base import JournalError


class LifecycleError(JournalError):
    """The journal is in the wrong state for the requested operation."""

    default_code = "lifecycle_error"


class InvalidAdapterError(LifecycleError):
    """An unknown adapter name was requested."""

    default_code = "invalid_adapter"

    def __init__(self, adapter_name: Any, supported: Iterable[str], **kwargs: Any) -> None:
        supported = tuple(supported)
        super().__init__(
            f"{adapter_name!r} is an invalid adapter. Please use one of {', '.join(supported)}",
            detail={"adapter_name": adapter_name, "supported": list(supported)},
            **kwargs,
        )
        self.adapter_name = adapter_name
        self.supported = supported


class AlreadyInitializedError(LifecycleError):
    """``create_client`` was called on a journal that is already connected."""

    default_code = "already_initialized"

    def __init__(self, adapter_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            f"{adapter_name!r} has already been initialized",
            detail={"adapter_name": adapter_name},
            **kwargs,
        )
        self.adapter_name = adapter_name


class NotInitializedError(LifecycleError):
    """A data operation was attempted before ``create_client``."""

    default_code = "not_initialized"

    def __init__(self, message: str = "Journal has not been initialized", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ClientInitializationError(LifecycleError):
    """The selected adapter failed to connect to its backend."""

    default_code = "client_initialization_failed"

    def __init__(self, adapter_name: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"Could not initialize {adapter_name!r} adapter: {cause}",
            detail={"adapter_name": adapter_name},
            cause=cause,
            **kwargs,
        )
        self.adapter_name = adapter_name


__all__ = [
    "AlreadyInitializedError",
    "ClientInitializationError",
    "InvalidAdapterError",
    "LifecycleError",
    "NotInitializedError",
]
