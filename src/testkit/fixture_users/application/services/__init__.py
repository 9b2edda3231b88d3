"""Application services for the fixture users context."""

from fixture_users.application.services.lifecycle_service import (
    FixtureLifecycleService,
)

__all__ = [
    "FixtureLifecycleService",
]
