"""Unit tests for the persisted Event record."""

from __future__ import annotations

import asyncio
import dataclasses
from datetime import UTC, datetime

import pytest

from event_journal import Event, Journal

CREATED_ON = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


class TestEvent:
    def test_to_dict_has_logical_record_shape(self) -> None:
        event = Event("ref1", 2, "Updated", {"a": 1}, "user-1", CREATED_ON, id=17)
        assert event.to_dict() == {
            "ref": "ref1",
            "version": 2,
            "event": "Updated",
            "payload": {"a": 1},
            "initiated_by": "user-1",
            "created_on": CREATED_ON,
        }

    def test_surrogate_id_is_not_part_of_identity(self) -> None:
        first = Event("ref1", 1, "Created", created_on=CREATED_ON, id=1)
        second = Event("ref1", 1, "Created", created_on=CREATED_ON, id="65a1b2c3d4e5f60718293a4b")
        assert first == second
        assert "id" not in first.to_dict()

    def test_is_frozen(self) -> None:
        event = Event("ref1", 1, "Created")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.version = 2  # type: ignore[misc]

    def test_created_on_defaults_to_aware_now(self) -> None:
        assert Event("ref1", 1, "Created").created_on.tzinfo is UTC

    def test_journal_events_serialise_to_the_same_shape(self) -> None:
        async def run() -> dict:
            async with Journal(adapter_name="memory") as journal:
                event = await journal.append_event("Created", "ref1", [1, 2], "user-1")
                return event.to_dict()

        record = asyncio.run(run())
        assert set(record) == {"ref", "version", "event", "payload", "initiated_by", "created_on"}
        assert (record["version"], record["payload"], record["initiated_by"]) == (1, [1, 2], "user-1")
