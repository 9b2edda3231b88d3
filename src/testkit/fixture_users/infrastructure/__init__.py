"""Infrastructure adapters for the fixture users context."""

from fixture_users.infrastructure.identity_store import (
    PendingAccount,
    SQLAlchemyIdentityStore,
    StoredAccount,
)

__all__ = [
    "PendingAccount",
    "SQLAlchemyIdentityStore",
    "StoredAccount",
]
