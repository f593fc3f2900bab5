"""Unit tests for InMemoryJournalAdapter."""

from __future__ import annotations

import asyncio

from event_journal.application.journal import InMemoryJournalAdapter, JournalAdapter
from event_journal.testing.contracts import JournalAdapterContractTest


class TestInMemoryAdapterContract(JournalAdapterContractTest):
    async def connect_adapter(self) -> JournalAdapter:
        return await InMemoryJournalAdapter().connect()


class TestInMemoryJournalAdapter:
    def test_name(self) -> None:
        assert InMemoryJournalAdapter.name == "memory"

    def test_connect_returns_self(self) -> None:
        adapter = InMemoryJournalAdapter()
        assert asyncio.run(adapter.connect()) is adapter
        assert adapter.connected is True

    def test_connect_merges_options(self) -> None:
        adapter = InMemoryJournalAdapter()
        asyncio.run(adapter.connect({"anything": 1}))
        assert adapter.config == {"anything": 1}

    def test_all_events_groups_by_ref(self) -> None:
        adapter = InMemoryJournalAdapter()

        async def run() -> list[tuple[str, int]]:
            await adapter.connect()
            await adapter.append_event("A", "a")
            await adapter.append_event("B", "b")
            await adapter.append_event("A2", "a")
            return [(e.ref, e.version) for e in adapter.all_events()]

        assert asyncio.run(run()) == [("a", 1), ("a", 2), ("b", 1)]

    def test_disconnect_drops_stored_events(self) -> None:
        adapter = InMemoryJournalAdapter()

        async def run() -> None:
            await adapter.connect()
            await adapter.append_event("A", "a")
            await adapter.disconnect()

        asyncio.run(run())
        assert adapter.connected is False
        assert adapter.all_events() == []

    def test_conflict_only_on_exact_version_collision(self) -> None:
        adapter = InMemoryJournalAdapter()

        async def run() -> list[int]:
            await adapter.connect()
            await adapter.append_event("A", "a", expected_version=3)
            # version 2 is below the latest stored version but still free
            await adapter.append_event("B", "a", expected_version=1)
            return [e.version for e in await adapter.list_events("a")]

        assert asyncio.run(run()) == [2, 4]

    def test_appended_event_does_not_share_stored_payload(self) -> None:
        adapter = InMemoryJournalAdapter()

        async def run() -> list[object]:
            await adapter.connect()
            appended = await adapter.append_event("A", "a", {"tags": ["x"]})
            appended.payload["tags"].append("y")
            return [e.payload for e in adapter.all_events()]

        assert asyncio.run(run()) == [{"tags": ["x"]}]
