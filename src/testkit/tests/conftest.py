"""Shared test fixtures for the fixture users test suite."""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine

from fixture_users.infrastructure import SQLAlchemyIdentityStore
from infrastructure.database import create_database_engine
from infrastructure.settings import DatabaseSettings


@pytest.fixture
def sample_users_config() -> list[dict]:
    """Raw ``users`` declarations as they appear in a suite config."""
    return [
        {
            "name": "alice",
            "pass": "alice-secret",
            "roles": ["editor"],
            "email": "a@x.test",
            "custom_fields": {
                "signup_date": {"type": "date", "value": "2024-01-01"},
            },
        },
        {
            "name": "bob",
            "roles": ["author", "editor"],
            "email": "b@x.test",
            "custom_fields": {"nickname": "bobby"},
        },
        {
            "name": "carol",
            "roles": ["administrator"],
            "email": "c@x.test",
        },
    ]


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """Provide an in-memory SQLite engine, disposed after the test."""
    engine = create_database_engine(DatabaseSettings(url="sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def identity_store(sqlite_engine: Engine) -> SQLAlchemyIdentityStore:
    """Provide a SQL identity store with its tables created.

    Uses the minimum bcrypt work factor to keep hashing fast.
    """
    store = SQLAlchemyIdentityStore(sqlite_engine, langcode="de", bcrypt_rounds=4)
    store.create_schema()
    return store
