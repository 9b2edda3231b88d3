"""Application value objects for fixture reconciliation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fixture_users.domain.value_objects import AccountId


class ReconciliationOutcome(StrEnum):
    """What happened to one fixture user during create-all or delete-all."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    REJECTED = "rejected"
    FAILED = "failed"
    DELETED = "deleted"
    ALREADY_ABSENT = "already_absent"


_FAILURE_OUTCOMES = frozenset(
    {ReconciliationOutcome.REJECTED, ReconciliationOutcome.FAILED}
)


@dataclass(frozen=True)
class ReconciliationResult:
    """Per-user result of a reconciliation step.

    Batch operations return one result per declared user, so the outcome of
    a whole run can be inspected as data instead of being read back from logs.
    """

    username: str
    outcome: ReconciliationOutcome
    account_id: AccountId | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """False when the store rejected the account or an error occurred."""
        return self.outcome not in _FAILURE_OUTCOMES
