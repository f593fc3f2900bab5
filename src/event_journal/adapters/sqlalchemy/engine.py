"""SQLAlchemy adapter – async engine construction from connection options."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def build_url(options: Mapping[str, Any]) -> URL:
    """Return ``options["url"]`` when given, else a URL from its parts."""
    if options.get("url"):
        return make_url(options["url"])
    port = options.get("port")
    return URL.create(
        drivername=options["drivername"],
        username=options.get("username") or None,
        password=options.get("password") or None,
        host=options.get("host") or None,
        port=int(port) if port else None,
        database=options.get("database") or None,
    )


def build_engine(options: Mapping[str, Any]) -> AsyncEngine:
    """Create an :class:`AsyncEngine` for the merged adapter options.

    ``pool_size`` is dropped for SQLite, whose async dialect uses a pool
    that does not accept it.
    """
    url = build_url(options)
    engine_kwargs: dict[str, Any] = {"echo": bool(options.get("echo", False))}
    if url.get_backend_name() != "sqlite" and options.get("pool_size"):
        engine_kwargs["pool_size"] = int(options["pool_size"])
    engine_kwargs.update(options.get("engine_options") or {})
    return create_async_engine(url, **engine_kwargs)


__all__ = ["build_engine", "build_url"]
