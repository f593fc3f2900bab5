"""Application journal – InMemoryJournalAdapter."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from event_journal.application.journal.adapter import JournalAdapter
from event_journal.application.journal.event import Event
from event_journal.kernel.errors import ConflictError
from event_journal.observability.logging import get_logger

logger = get_logger(__name__)


def _detached(entry: Event) -> Event:
    return dataclasses.replace(entry, payload=copy.deepcopy(entry.payload))


class InMemoryJournalAdapter(JournalAdapter):
    """In-memory :class:`JournalAdapter` for tests and local development.

    The collision check and the insert run without an ``await`` between
    them, so on one event loop they behave like a unique index on
    ``(ref, version)``.

    Payloads are deep-copied on the way in and on the way out, so neither
    the writer nor a reader can change stored history.
    """

    name = "memory"

    def __init__(self) -> None:
        super().__init__()
        # ref → version → Event
        self._db: dict[str, dict[int, Event]] = {}

    async def connect(self, options: Mapping[str, Any] | None = None) -> InMemoryJournalAdapter:
        self.config = self.resolve_options(options)
        self._db = {}
        self.connected = True
        logger.debug("adapter.connected", adapter=self.name)
        return self

    async def disconnect(self) -> InMemoryJournalAdapter:
        self._db = {}
        self.connected = False
        logger.debug("adapter.disconnected", adapter=self.name)
        return self

    async def append_event(
        self,
        name: str,
        ref: str,
        payload: Any = None,
        initiated_by: str | None = None,
        expected_version: int | None = None,
    ) -> Event:
        self._require_connection()
        if expected_version is None:
            expected_version = await self.latest_version(ref)

        entry = Event(
            ref=ref,
            version=expected_version + 1,
            event=name,
            payload=copy.deepcopy(payload),
            initiated_by=initiated_by,
            created_on=datetime.now(UTC),
        )
        stream = self._db.setdefault(ref, {})
        if entry.version in stream:
            actual = await self.latest_version(ref)
            logger.warning(
                "adapter.version_conflict",
                adapter=self.name,
                ref=ref,
                expected_version=expected_version,
                actual_version=actual,
            )
            raise ConflictError(ref, expected_version, actual)
        stream[entry.version] = entry
        return _detached(entry)

    async def list_events(
        self,
        ref: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> list[Event]:
        self._require_connection()
        stream = self._db.get(ref, {})
        return [
            _detached(stream[version])
            for version in sorted(stream)
            if (from_version is None or version >= from_version)
            and (to_version is None or version <= to_version)
        ]

    async def latest_version(self, ref: str) -> int:
        self._require_connection()
        return max(self._db.get(ref, {}), default=0)

    def all_events(self) -> list[Event]:
        """Return every stored event, grouped by ref and ordered by version."""
        return [_detached(stream[v]) for stream in self._db.values() for v in sorted(stream)]


__all__ = ["InMemoryJournalAdapter"]
