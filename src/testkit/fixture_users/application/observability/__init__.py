"""Domain-Oriented Observability for the fixture users application layer."""

from fixture_users.application.observability.lifecycle_service_probe import (
    DefaultFixtureLifecycleProbe,
    FixtureLifecycleProbe,
)

__all__ = [
    "DefaultFixtureLifecycleProbe",
    "FixtureLifecycleProbe",
]
