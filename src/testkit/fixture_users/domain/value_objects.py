"""Value objects for the fixture users domain."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

AccountId: TypeAlias = int | str
"""Identifier assigned to an account by the identity store."""


class FieldType(StrEnum):
    """Type tags that a custom field declaration may carry.

    A tagged field value is adapted before it is written to the identity
    store; see FieldValueAdapter.
    """

    DATE = "date"


class FixtureState(StrEnum):
    """Lifecycle state of a fixture user within a test run.

    DECLARED -> EXISTING -> DELETED, or DECLARED -> CREATED -> DELETED.
    EXISTING and CREATED differ only in whether this run created the account.
    """

    DECLARED = "declared"
    EXISTING = "existing"
    CREATED = "created"
    DELETED = "deleted"
