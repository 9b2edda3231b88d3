"""Domain-Oriented Observability for the fixture users domain layer."""

from fixture_users.domain.observability.registry_probe import (
    DefaultRegistryProbe,
    RegistryProbe,
)

__all__ = [
    "DefaultRegistryProbe",
    "RegistryProbe",
]
