"""Unit tests for the SQLAlchemy journal adapter.

Uses an in-memory SQLite database via *aiosqlite*, no running server needed.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import inspect, select

from event_journal import Event, Journal
from event_journal.adapters.sqlalchemy import SQLAlchemyJournalAdapter, build_url, events_table
from event_journal.application.journal import JournalAdapter
from event_journal.kernel.errors import AdapterError, ClientInitializationError, ConflictError
from event_journal.testing.contracts import JournalAdapterContractTest

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


class TestSQLAlchemyAdapterContract(JournalAdapterContractTest):
    # every checkout of an in-memory SQLite engine shares one connection
    concurrent_appends = False

    async def connect_adapter(self) -> JournalAdapter:
        return await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL})


# ---------------------------------------------------------------------------
# URL / engine options
# ---------------------------------------------------------------------------


class TestBuildUrl:
    def test_defaults_target_local_postgres(self) -> None:
        url = build_url(SQLAlchemyJournalAdapter().resolve_options(None))
        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "localhost"
        assert url.port == 5432
        assert url.database == "event_source"
        assert url.username is None

    def test_caller_options_win(self) -> None:
        options = SQLAlchemyJournalAdapter().resolve_options(
            {"host": "db.internal", "port": "6543", "username": "journal", "password": "s3cret"}
        )
        url = build_url(options)
        assert url.host == "db.internal"
        assert url.port == 6543
        assert url.username == "journal"
        assert url.password == "s3cret"
        assert url.database == "event_source"

    def test_explicit_url_overrides_parts(self) -> None:
        url = build_url({"url": SQLITE_URL, "host": "ignored", "drivername": "postgresql+asyncpg"})
        assert url.get_backend_name() == "sqlite"
        assert url.host is None


class TestEventsTable:
    def test_columns_and_unique_constraint(self) -> None:
        table = events_table("journal_events")
        assert table.name == "journal_events"
        assert set(table.c.keys()) == {
            "id", "ref", "version", "event", "initiated_by", "created_on", "payload",
        }
        uniques = [
            tuple(col.name for col in c.columns)
            for c in table.constraints
            if c.__class__.__name__ == "UniqueConstraint"
        ]
        assert ("ref", "version") in uniques


# ---------------------------------------------------------------------------
# Adapter behaviour
# ---------------------------------------------------------------------------


class TestSQLAlchemyJournalAdapter:
    def test_connect_creates_table_with_custom_name(self) -> None:
        async def run() -> list[str]:
            adapter = await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL, "table_name": "journal"})
            try:
                async with adapter._engine.connect() as conn:  # noqa: SLF001
                    return await conn.run_sync(lambda c: inspect(c).get_table_names())
            finally:
                await adapter.disconnect()

        assert "journal" in asyncio.run(run())

    def test_append_assigns_surrogate_id_and_stores_row(self) -> None:
        async def run() -> tuple[Event, list[Any]]:
            adapter = await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL})
            try:
                event = await adapter.append_event("Created", "ref1", {"a": 1}, "user-1")
                async with adapter._engine.connect() as conn:  # noqa: SLF001
                    rows = (await conn.execute(select(adapter.table))).mappings().all()
                return event, rows
            finally:
                await adapter.disconnect()

        event, rows = asyncio.run(run())
        assert event.id == 1
        assert len(rows) == 1
        assert rows[0]["event"] == "Created"
        assert rows[0]["payload"] == {"a": 1}
        assert rows[0]["initiated_by"] == "user-1"

    def test_listed_event_matches_appended_event(self) -> None:
        async def run() -> tuple[Event, Event]:
            adapter = await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL})
            try:
                appended = await adapter.append_event("Created", "ref1", [1, 2])
                (listed,) = await adapter.list_events("ref1")
                return appended, listed
            finally:
                await adapter.disconnect()

        appended, listed = asyncio.run(run())
        assert listed == appended
        assert listed.id == appended.id
        assert listed.created_on.tzinfo is not None

    def test_conflict_chains_integrity_error(self) -> None:
        async def run() -> ConflictError:
            adapter = await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL})
            try:
                await adapter.append_event("A", "ref1")
                with pytest.raises(ConflictError) as exc_info:
                    await adapter.append_event("B", "ref1", expected_version=0)
                return exc_info.value
            finally:
                await adapter.disconnect()

        error = asyncio.run(run())
        assert type(error.__cause__).__name__ == "IntegrityError"

    def test_unserialisable_payload_raises_adapter_error(self) -> None:
        async def run() -> AdapterError:
            adapter = await SQLAlchemyJournalAdapter().connect({"url": SQLITE_URL})
            try:
                with pytest.raises(AdapterError) as exc_info:
                    await adapter.append_event("A", "ref1", {"when": {1, 2}})
                return exc_info.value
            finally:
                await adapter.disconnect()

        error = asyncio.run(run())
        assert error.ref == "ref1"
        assert error.cause is not None

    def test_connect_failure_raises_adapter_error(self, tmp_path: Path) -> None:
        url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'journal.db'}"
        with pytest.raises(AdapterError):
            asyncio.run(SQLAlchemyJournalAdapter().connect({"url": url}))

    def test_file_database_persists_across_connections(self, tmp_path: Path) -> None:
        url = f"sqlite+aiosqlite:///{tmp_path / 'journal.db'}"

        async def run() -> list[int]:
            first = await SQLAlchemyJournalAdapter().connect({"url": url})
            await first.append_event("A", "ref1")
            await first.append_event("B", "ref1")
            await first.disconnect()

            second = await SQLAlchemyJournalAdapter().connect({"url": url})
            try:
                return [e.version for e in await second.list_events("ref1")]
            finally:
                await second.disconnect()

        assert asyncio.run(run()) == [1, 2]


class TestJournalWithRelationalAdapter:
    def test_end_to_end(self) -> None:
        journal = Journal(adapter_name="sql", db_connection_options={"url": SQLITE_URL})

        async def run() -> tuple[list[tuple[int, str]], ConflictError]:
            async with journal:
                await journal.append_event("Created", "ref1", {"a": 1})
                await journal.append_event("Updated", "ref1", {"a": 2})
                with pytest.raises(ConflictError) as exc_info:
                    await journal.append_event("Updated", "ref1", {"a": 3}, None, 1)
                events = await journal.list_events("ref1")
                return [(e.version, e.event) for e in events], exc_info.value

        events, error = asyncio.run(run())
        assert events == [(1, "Created"), (2, "Updated")]
        assert (error.expected_version, error.actual_version) == (1, 2)

    def test_unreachable_database_fails_initialization(self, tmp_path: Path) -> None:
        journal = Journal(adapter_name="relational")
        url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'journal.db'}"
        with pytest.raises(ClientInitializationError) as exc_info:
            asyncio.run(journal.create_client(connection_options={"url": url}))
        assert isinstance(exc_info.value.__cause__, AdapterError)
        assert journal.initialized is False
