"""Database engine creation for the identity store.

Provides a factory for synchronous SQLAlchemy engines. Fixture reconciliation
runs sequentially inside the test process, so no async driver is involved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "create_database_engine",
    "is_in_memory_sqlite",
]


def create_database_engine(settings: DatabaseSettings) -> Engine:
    """Create an engine for the configured user store.

    In-memory SQLite databases live as long as their connection, so they are
    served from a single shared connection (StaticPool).

    Args:
        settings: Database connection settings

    Returns:
        Configured engine
    """
    options: dict[str, Any] = {
        "echo": settings.echo,
        "pool_pre_ping": True,  # Verify connections before using
    }

    if is_in_memory_sqlite(settings.url):
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}

    return create_engine(settings.url, **options)


def is_in_memory_sqlite(url: str) -> bool:
    """Return True when the URL points at an in-memory SQLite database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (
        None,
        "",
        ":memory:",
    )
