"""Domain aggregates for the fixture users context."""

from fixture_users.domain.aggregates.fixture_user import FixtureUser

__all__ = [
    "FixtureUser",
]
