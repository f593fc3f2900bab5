"""Application journal – adapter registry.

Maps a configured adapter name to a concrete :class:`JournalAdapter`.
Backend modules are imported only when their adapter is selected, so the
memory adapter works without SQLAlchemy or motor installed.
"""

from __future__ import annotations

from typing import Any, Callable

from event_journal.application.journal.adapter import JournalAdapter
from event_journal.kernel.errors import InvalidAdapterError

SUPPORTED_ADAPTERS: tuple[str, ...] = ("memory", "relational", "document")

ADAPTER_ALIASES: dict[str, str] = {
    "mongodb": "document",
    "mongo": "document",
    "sql": "relational",
    "sqlalchemy": "relational",
    "postgresql": "relational",
    "postgres": "relational",
}


def _memory() -> JournalAdapter:
    from event_journal.application.journal.memory import InMemoryJournalAdapter

    return InMemoryJournalAdapter()


def _relational() -> JournalAdapter:
    from event_journal.adapters.sqlalchemy import SQLAlchemyJournalAdapter

    return SQLAlchemyJournalAdapter()


def _document() -> JournalAdapter:
    from event_journal.adapters.mongodb import MongoJournalAdapter

    return MongoJournalAdapter()


_FACTORIES: dict[str, Callable[[], JournalAdapter]] = {
    "memory": _memory,
    "relational": _relational,
    "document": _document,
}


def resolve_adapter_name(name: Any) -> str:
    """Return the canonical adapter name for *name* (case-insensitive).

    Raises :class:`InvalidAdapterError` for anything outside
    :data:`SUPPORTED_ADAPTERS` and their aliases.
    """
    if not isinstance(name, str):
        raise InvalidAdapterError(name, SUPPORTED_ADAPTERS)
    key = name.strip().lower()
    key = ADAPTER_ALIASES.get(key, key)
    if key not in _FACTORIES:
        raise InvalidAdapterError(name, SUPPORTED_ADAPTERS)
    return key


def create_adapter(name: str) -> JournalAdapter:
    """Instantiate a fresh, unconnected adapter for *name*."""
    return _FACTORIES[resolve_adapter_name(name)]()


__all__ = ["ADAPTER_ALIASES", "SUPPORTED_ADAPTERS", "create_adapter", "resolve_adapter_name"]
