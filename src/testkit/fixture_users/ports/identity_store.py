"""Identity store protocols (ports) for the fixture users context.

The identity store is the application's system of record for user
accounts. The lifecycle service talks to it only through these narrow
protocols, so any user backend can be plugged in.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fixture_users.domain.value_objects import AccountId


@runtime_checkable
class Account(Protocol):
    """An account that exists in the identity store."""

    @property
    def id(self) -> AccountId:
        """Store-assigned identifier."""
        ...

    @property
    def name(self) -> str:
        """Unique account name."""
        ...


@runtime_checkable
class MutableAccount(Protocol):
    """A new account under construction, not yet persisted."""

    @property
    def id(self) -> AccountId | None:
        """Store-assigned identifier, None until persisted."""
        ...

    def set_password(self, password: str) -> None:
        """Set the plaintext password; the store decides how to keep it."""
        ...

    def set_email(self, email: str) -> None:
        """Set the account email address."""
        ...

    def set_username(self, username: str) -> None:
        """Set the unique account name."""
        ...

    def set(self, field_name: str, value: Any) -> None:
        """Set an arbitrary account field (base or custom profile field)."""
        ...

    def add_role(self, role: str) -> None:
        """Grant a role to the account."""
        ...

    def activate(self) -> None:
        """Mark the account as active (not blocked)."""
        ...


@runtime_checkable
class IIdentityStore(Protocol):
    """Capability interface of the external identity store.

    Each call is an atomic request/response; transactional behaviour
    beyond a single call is the store's own business.
    """

    def find_by_name(self, name: str) -> Account | None:
        """Retrieve an account by name.

        Args:
            name: The account name

        Returns:
            The account, or None if not found
        """
        ...

    def create_account(self) -> MutableAccount:
        """Start building a new account."""
        ...

    def persist(self, account: MutableAccount) -> bool:
        """Save a new account.

        Args:
            account: The account built through create_account()

        Returns:
            True if saved, False if the store rejected it without raising
        """
        ...

    def delete_by_id(self, account_id: AccountId) -> None:
        """Delete an account and everything attached to it.

        Args:
            account_id: Identifier of the account to delete
        """
        ...

    def current_language(self) -> str:
        """Language code the application currently runs in."""
        ...
