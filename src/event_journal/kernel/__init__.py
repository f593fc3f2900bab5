"""Kernel – backend-agnostic building blocks."""

from event_journal.kernel.errors import (
    AdapterError,
    ConflictError,
    JournalError,
    LifecycleError,
    ValidationError,
)

__all__ = [
    "AdapterError",
    "ConflictError",
    "JournalError",
    "LifecycleError",
    "ValidationError",
]
