"""Application layer for the fixture users context."""

from fixture_users.application.services import FixtureLifecycleService
from fixture_users.application.value_objects import (
    ReconciliationOutcome,
    ReconciliationResult,
)

__all__ = [
    "FixtureLifecycleService",
    "ReconciliationOutcome",
    "ReconciliationResult",
]
