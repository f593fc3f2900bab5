"""Unit tests for the adapter registry."""

from __future__ import annotations

import pytest

from event_journal.adapters.mongodb import MongoJournalAdapter
from event_journal.adapters.sqlalchemy import SQLAlchemyJournalAdapter
from event_journal.application.journal import (
    SUPPORTED_ADAPTERS,
    InMemoryJournalAdapter,
    create_adapter,
    resolve_adapter_name,
)
from event_journal.kernel.errors import InvalidAdapterError


class TestResolveAdapterName:
    @pytest.mark.parametrize("name", SUPPORTED_ADAPTERS)
    def test_supported_names_resolve_to_themselves(self, name: str) -> None:
        assert resolve_adapter_name(name) == name

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Memory", "memory"),
            ("RELATIONAL", "relational"),
            (" document ", "document"),
            ("mongodb", "document"),
            ("MongoDB", "document"),
            ("sql", "relational"),
            ("postgresql", "relational"),
        ],
    )
    def test_case_insensitive_and_aliases(self, name: str, expected: str) -> None:
        assert resolve_adapter_name(name) == expected

    @pytest.mark.parametrize("name", ["badadapter", "", None, 3])
    def test_unknown_names_raise(self, name: object) -> None:
        with pytest.raises(InvalidAdapterError) as exc_info:
            resolve_adapter_name(name)
        assert exc_info.value.supported == SUPPORTED_ADAPTERS
        assert exc_info.value.code == "invalid_adapter"


class TestCreateAdapter:
    @pytest.mark.parametrize(
        ("name", "cls"),
        [
            ("memory", InMemoryJournalAdapter),
            ("relational", SQLAlchemyJournalAdapter),
            ("document", MongoJournalAdapter),
        ],
    )
    def test_creates_unconnected_adapter(self, name: str, cls: type) -> None:
        adapter = create_adapter(name)
        assert type(adapter) is cls
        assert adapter.connected is False
        assert adapter.name == name

    def test_each_call_returns_a_fresh_instance(self) -> None:
        assert create_adapter("memory") is not create_adapter("memory")
