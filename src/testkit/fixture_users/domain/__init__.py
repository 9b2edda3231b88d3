"""Domain layer for the fixture users context.

Holds the declared fixture users, their registry and the custom field
adaptation rules. The domain has no knowledge of the identity store.
"""

from fixture_users.domain.aggregates import FixtureUser
from fixture_users.domain.exceptions import FixtureConfigError, FixtureUserNotFoundError
from fixture_users.domain.field_adapters import FieldValueAdapter
from fixture_users.domain.registry import FixtureRegistry
from fixture_users.domain.value_objects import AccountId, FieldType, FixtureState

__all__ = [
    "AccountId",
    "FieldType",
    "FieldValueAdapter",
    "FixtureConfigError",
    "FixtureRegistry",
    "FixtureState",
    "FixtureUser",
    "FixtureUserNotFoundError",
]
