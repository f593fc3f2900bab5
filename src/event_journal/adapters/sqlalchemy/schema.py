"""SQLAlchemy adapter – events table definition."""
from __future__ import annotations

from sqlalchemy import (
    JSON,
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)


def events_table(table_name: str = "events", metadata: MetaData | None = None) -> Table:
    """Build the journal table bound to a fresh (or the given) ``MetaData``.

    ``UNIQUE (ref, version)`` is the concurrency guard for appends.
    """
    metadata = metadata if metadata is not None else MetaData()
    return Table(
        table_name,
        metadata,
        # SQLite only autoincrements an INTEGER PRIMARY KEY
        Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        Column("ref", String(64), nullable=False),
        Column("version", Integer, nullable=False, default=1),
        Column("event", String(75), nullable=False),
        Column("initiated_by", String(64), nullable=True),
        Column("created_on", DateTime(timezone=True), nullable=False),
        Column("payload", JSON, nullable=True),
        UniqueConstraint("ref", "version", name=f"uq_{table_name}_ref_version"),
        Index(f"ix_{table_name}_ref_event", "ref", "event"),
        Index(f"ix_{table_name}_created_on", "created_on"),
    )


__all__ = ["events_table"]
