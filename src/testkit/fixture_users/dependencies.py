"""Dependency wiring for the fixture users context.

Composes infrastructure resources (engine, settings) with the fixture users
components (identity store, probes, suite module).
"""

from __future__ import annotations

from fixture_users.application.observability import DefaultFixtureLifecycleProbe
from fixture_users.domain.observability import DefaultRegistryProbe
from fixture_users.infrastructure import SQLAlchemyIdentityStore
from fixture_users.infrastructure.observability import DefaultIdentityStoreProbe
from fixture_users.presentation.suite_module import FixtureUsersModule
from infrastructure.database import create_database_engine
from infrastructure.settings import DatabaseSettings, FixtureUsersSettings
from shared_kernel.observability_context import ObservationContext


def get_identity_store(
    db_settings: DatabaseSettings,
    settings: FixtureUsersSettings,
    context: ObservationContext | None = None,
) -> SQLAlchemyIdentityStore:
    """Create the SQL identity store described by the settings.

    Creates the user tables first when ``create_schema`` is enabled.
    """
    probe = DefaultIdentityStoreProbe()
    if context is not None:
        probe = probe.with_context(context)

    store = SQLAlchemyIdentityStore(
        engine=create_database_engine(db_settings),
        langcode=settings.langcode,
        bcrypt_rounds=db_settings.bcrypt_rounds,
        probe=probe,
    )
    if db_settings.create_schema:
        store.create_schema()
    return store


def get_fixture_users_module(
    identity_store: SQLAlchemyIdentityStore,
    context: ObservationContext | None = None,
) -> FixtureUsersModule:
    """Create a suite module whose probes carry the observation context."""
    lifecycle_probe = DefaultFixtureLifecycleProbe()
    registry_probe = DefaultRegistryProbe()
    if context is not None:
        lifecycle_probe = lifecycle_probe.with_context(context)
        registry_probe = registry_probe.with_context(context)

    return FixtureUsersModule(
        identity_store=identity_store,
        lifecycle_probe=lifecycle_probe,
        registry_probe=registry_probe,
    )
