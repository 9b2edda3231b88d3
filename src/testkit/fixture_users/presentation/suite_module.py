"""Suite-facing surface of the fixture users context.

FixtureUsersModule is what a test framework talks to: it is initialized
with the suite configuration, exposes before/after suite hooks and lets
test steps look up the declared fixture users.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from fixture_users.application import FixtureLifecycleService, ReconciliationResult
from fixture_users.application.observability import FixtureLifecycleProbe
from fixture_users.domain import FieldValueAdapter, FixtureRegistry, FixtureUser
from fixture_users.domain.observability import RegistryProbe
from fixture_users.ports import IIdentityStore
from fixture_users.presentation.models import SuiteConfig


class FixtureUsersModule:
    """Fixture user management for one test run.

    The suite hooks only act when the configuration asks for it: users are
    created before the suite when ``create`` is true and deleted after the
    suite when ``delete`` is true.
    """

    def __init__(
        self,
        identity_store: IIdentityStore,
        field_adapter: FieldValueAdapter | None = None,
        lifecycle_probe: FixtureLifecycleProbe | None = None,
        registry_probe: RegistryProbe | None = None,
    ) -> None:
        self._identity_store = identity_store
        self._field_adapter = field_adapter or FieldValueAdapter()
        self._lifecycle_probe = lifecycle_probe
        self._registry_probe = registry_probe
        self._config = SuiteConfig()
        self._registry = FixtureRegistry(probe=registry_probe)
        self._lifecycle = self._create_lifecycle()

    @property
    def config(self) -> SuiteConfig:
        return self._config

    @property
    def registry(self) -> FixtureRegistry:
        return self._registry

    @property
    def lifecycle(self) -> FixtureLifecycleService:
        return self._lifecycle

    def initialize(self, config: SuiteConfig | Mapping[str, Any]) -> None:
        """Load the declared fixture users from the suite configuration.

        Args:
            config: Parsed suite configuration or its raw mapping

        Raises:
            pydantic.ValidationError: If an option has an invalid type
            FixtureConfigError: If a user declaration is malformed
        """
        if not isinstance(config, SuiteConfig):
            config = SuiteConfig.model_validate(config)

        self._config = config
        self._registry = FixtureRegistry.build(
            config.users,
            config.default_pass,
            probe=self._registry_probe,
        )
        self._lifecycle = self._create_lifecycle()

    def before_suite(self) -> list[ReconciliationResult]:
        """Create all declared users if the configuration enables it."""
        if not self._config.create:
            return []
        return self._lifecycle.create_all()

    def after_suite(self) -> list[ReconciliationResult]:
        """Delete all declared users if the configuration enables it."""
        if not self._config.delete:
            return []
        return self._lifecycle.delete_all()

    def user_exists(self, username: str) -> bool:
        """Check whether the identity store currently has an account named ``username``."""
        return self._identity_store.find_by_name(username) is not None

    def get_all_test_users(self) -> Mapping[str, FixtureUser]:
        return self._registry.all()

    def get_test_users_by_roles(
        self, roles: Iterable[str] | str, return_one: bool = False
    ) -> list[FixtureUser]:
        """Get declared users holding at least one of the roles.

        With ``return_one`` the result holds only the last matching user.
        """
        return self._registry.by_roles(roles, return_one=return_one)

    def get_test_user_by_name(self, username: str) -> FixtureUser:
        """Get a declared user by name.

        Raises:
            FixtureUserNotFoundError: If the user was not declared
        """
        return self._registry.by_name(username)

    def _create_lifecycle(self) -> FixtureLifecycleService:
        return FixtureLifecycleService(
            registry=self._registry,
            identity_store=self._identity_store,
            field_adapter=self._field_adapter,
            probe=self._lifecycle_probe,
        )
