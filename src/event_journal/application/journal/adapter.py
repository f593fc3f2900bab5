"""Application journal – JournalAdapter port."""

from __future__ import annotations

import abc
import copy
from collections.abc import Mapping
from typing import Any, ClassVar

from event_journal.application.journal.event import Event
from event_journal.kernel.errors import AdapterError


def merge_options(defaults: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep-merge *overrides* onto a copy of *defaults*; caller keys win."""
    merged = copy.deepcopy(dict(defaults))
    for key, value in (overrides or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
        else:
            merged[key] = value
    return merged


class JournalAdapter(abc.ABC):
    """Port: backend-specific storage for journal events.

    One instance owns one backend connection.  Lifecycle:
    ``unconnected → connected → unconnected``; a disconnected instance is
    discarded, never reused.

    Optimistic concurrency
    ~~~~~~~~~~~~~~~~~~~~~~
    :meth:`append_event` stores ``expected_version + 1``.  When
    *expected_version* is omitted it is read from :meth:`latest_version`.
    The backend's uniqueness guarantee on ``(ref, version)`` is the only
    serialization point: a collision raises
    :class:`~event_journal.kernel.errors.ConflictError` carrying the expected
    version and the latest version re-read after the failed write.
    Conflicts are never retried here.
    """

    name: ClassVar[str] = ""
    default_options: ClassVar[Mapping[str, Any]] = {}

    def __init__(self) -> None:
        self.config: dict[str, Any] = {}
        self.connected = False

    def resolve_options(self, options: Mapping[str, Any] | None) -> dict[str, Any]:
        return merge_options(self.default_options, options)

    def _require_connection(self) -> None:
        if not self.connected:
            raise AdapterError(self.name, f"{self.name} adapter is not connected")

    @abc.abstractmethod
    async def connect(self, options: Mapping[str, Any] | None = None) -> JournalAdapter:
        """Open the backend handle using defaults merged with *options*."""

    @abc.abstractmethod
    async def disconnect(self) -> JournalAdapter:
        """Release the backend handle."""

    @abc.abstractmethod
    async def append_event(
        self,
        name: str,
        ref: str,
        payload: Any = None,
        initiated_by: str | None = None,
        expected_version: int | None = None,
    ) -> Event:
        """Persist a new event at ``expected_version + 1`` for *ref*."""

    @abc.abstractmethod
    async def list_events(
        self,
        ref: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> list[Event]:
        """Return events for *ref* within the inclusive bounds, ascending."""

    @abc.abstractmethod
    async def latest_version(self, ref: str) -> int:
        """Return the highest stored version for *ref*, or ``0``."""


__all__ = ["JournalAdapter", "merge_options"]
