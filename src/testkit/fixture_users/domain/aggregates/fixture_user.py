"""FixtureUser aggregate for the fixture users context."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from fixture_users.domain.exceptions import FixtureConfigError
from fixture_users.domain.value_objects import AccountId, FixtureState


@dataclass
class FixtureUser:
    """Declared desired state of one test user.

    The declared part (name, password, roles, email, custom fields) comes from
    suite configuration. ``resolved_id`` is filled in once the account is known
    to exist in the identity store, either because it was already there or
    because this run created it, and is cleared only when the account is
    deleted.

    Business rules:
    - The name is the registry key and cannot be reassigned
    - Roles form a set: order is irrelevant and duplicates collapse
    """

    name: str
    password: str = field(default="", repr=False)
    roles: frozenset[str] = field(default_factory=frozenset)
    email: str = ""
    custom_fields: dict[str, Any] = field(default_factory=dict)
    resolved_id: AccountId | None = None
    state: FixtureState = FixtureState.DECLARED

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("FixtureUser.name cannot be reassigned")
        super().__setattr__(key, value)

    def __str__(self) -> str:
        """Return string representation."""
        return f"FixtureUser({self.name})"

    @classmethod
    def from_config(
        cls, entry: Mapping[str, Any], default_pass: str = ""
    ) -> FixtureUser:
        """Create a FixtureUser from one ``users`` entry of the suite config.

        Args:
            entry: Mapping with ``name`` and optional ``pass``, ``roles``,
                ``email`` and ``custom_fields``
            default_pass: Password used when the entry has no ``pass``

        Returns:
            A FixtureUser in the DECLARED state

        Raises:
            FixtureConfigError: If the entry is not a mapping, has no name
                or its custom fields are not a mapping
        """
        if not isinstance(entry, Mapping):
            raise FixtureConfigError(
                f"Fixture user entry must be a mapping, got {type(entry).__name__}"
            )

        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise FixtureConfigError("Fixture user entry is missing a 'name'")

        password = entry.get("pass")
        roles = entry.get("roles") or []
        if isinstance(roles, str):
            roles = [roles]

        custom_fields = entry.get("custom_fields") or {}
        if not isinstance(custom_fields, Mapping):
            raise FixtureConfigError(
                f"custom_fields of fixture user '{name}' must be a mapping"
            )

        return cls(
            name=name,
            password=str(password) if password else default_pass,
            roles=frozenset(str(role) for role in roles),
            email=entry.get("email") or "",
            custom_fields=dict(custom_fields),
        )

    @property
    def is_resolved(self) -> bool:
        """Check whether the identity store id of this user is known."""
        return self.resolved_id is not None

    def has_any_role(self, roles: Iterable[str]) -> bool:
        """Check if the user holds at least one of the given roles."""
        return not self.roles.isdisjoint(roles)

    def mark_existing(self, account_id: AccountId) -> None:
        """Record that the account was already present in the identity store."""
        self.resolved_id = account_id
        self.state = FixtureState.EXISTING

    def mark_created(self, account_id: AccountId) -> None:
        """Record that this run created the account."""
        self.resolved_id = account_id
        self.state = FixtureState.CREATED

    def mark_deleted(self) -> None:
        """Record that the account was removed from the identity store."""
        self.resolved_id = None
        self.state = FixtureState.DELETED
