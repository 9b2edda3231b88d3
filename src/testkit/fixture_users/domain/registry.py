"""Fixture registry: the ordered, name-keyed collection of declared test users."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from fixture_users.domain.aggregates import FixtureUser
from fixture_users.domain.exceptions import FixtureUserNotFoundError
from fixture_users.domain.observability import DefaultRegistryProbe, RegistryProbe


class FixtureRegistry:
    """Registry of declared fixture users, keyed by name in declaration order.

    The registry owns the FixtureUser entities for the duration of a test run.
    Lifecycle operations borrow the entities to record resolved ids, but the
    set of declared names never changes after the registry is built.

    Declarations are insert-or-replace: a later entry with an already known
    name overwrites the earlier one and keeps its position in the order.
    """

    def __init__(self, probe: RegistryProbe | None = None) -> None:
        self._users: dict[str, FixtureUser] = {}
        self._probe = probe or DefaultRegistryProbe()

    @classmethod
    def build(
        cls,
        config_users: Any,
        default_pass: str = "",
        probe: RegistryProbe | None = None,
    ) -> FixtureRegistry:
        """Build a registry from the ``users`` section of the suite config.

        Args:
            config_users: Sequence of user declarations; anything else
                (missing, a mapping, a string) yields an empty registry
            default_pass: Password for entries that declare none
            probe: Optional domain probe for observability

        Returns:
            The populated registry

        Raises:
            FixtureConfigError: If an entry cannot be turned into a user
        """
        registry = cls(probe=probe)

        if not isinstance(config_users, Sequence) or isinstance(
            config_users, (str, bytes)
        ):
            registry._probe.fixture_users_not_configured()
            return registry

        for entry in config_users:
            registry.put(FixtureUser.from_config(entry, default_pass))

        return registry

    def put(self, user: FixtureUser) -> None:
        """Insert a user, replacing any earlier declaration with the same name."""
        replaced = user.name in self._users
        self._users[user.name] = user

        if replaced:
            self._probe.fixture_user_replaced(user.name)
        else:
            self._probe.fixture_user_registered(user.name, sorted(user.roles))

    def by_name(self, name: str) -> FixtureUser:
        """Get a fixture user by name.

        Raises:
            FixtureUserNotFoundError: If no user with that name was declared
        """
        try:
            return self._users[name]
        except KeyError:
            raise FixtureUserNotFoundError(name) from None

    def by_roles(
        self, roles: Iterable[str] | str, return_one: bool = False
    ) -> list[FixtureUser]:
        """Get the fixture users holding at least one of the given roles.

        Matches keep declaration order. With ``return_one`` only the last
        match is returned, as a single-element list.

        Args:
            roles: Roles to match (a single role name is accepted)
            return_one: Return only the last matching user

        Returns:
            Matching users; empty when none match
        """
        wanted = {roles} if isinstance(roles, str) else set(roles)
        matches = [user for user in self._users.values() if user.has_any_role(wanted)]

        if return_one and matches:
            return [matches[-1]]
        return matches

    def all(self) -> Mapping[str, FixtureUser]:
        """Get a read-only view of every declared user, keyed by name."""
        return MappingProxyType(self._users)

    def __iter__(self) -> Iterator[FixtureUser]:
        return iter(list(self._users.values()))

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, name: object) -> bool:
        return name in self._users
