"""Protocol for fixture lifecycle service observability.

Defines the interface for domain probes that capture application-level
domain events for fixture creation and deletion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from fixture_users.domain.value_objects import AccountId
    from shared_kernel.observability_context import ObservationContext


class FixtureLifecycleProbe(Protocol):
    """Domain probe for fixture lifecycle operations."""

    def fixture_user_already_exists(
        self, username: str, account_id: AccountId
    ) -> None:
        """Record that an account with the fixture name already existed."""
        ...

    def fixture_user_creating(self, username: str) -> None:
        """Record that creation of a fixture account has started."""
        ...

    def fixture_user_created(self, username: str, account_id: AccountId) -> None:
        """Record that a fixture account was created."""
        ...

    def fixture_user_rejected(self, username: str) -> None:
        """Record that the identity store declined to save a fixture account."""
        ...

    def fixture_user_creation_failed(self, username: str, error: str) -> None:
        """Record that creating a fixture account raised an error."""
        ...

    def fixture_user_deleted(self, username: str, account_id: AccountId) -> None:
        """Record that a fixture account was deleted."""
        ...

    def fixture_user_already_absent(self, username: str) -> None:
        """Record that there was no account to delete."""
        ...

    def fixture_user_deletion_failed(self, username: str, error: str) -> None:
        """Record that deleting a fixture account raised an error."""
        ...

    def with_context(self, context: ObservationContext) -> FixtureLifecycleProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultFixtureLifecycleProbe:
    """Default implementation of FixtureLifecycleProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultFixtureLifecycleProbe:
        """Create a new probe with observation context bound."""
        return DefaultFixtureLifecycleProbe(logger=self._logger, context=context)

    def fixture_user_already_exists(
        self, username: str, account_id: AccountId
    ) -> None:
        """Record that the account already existed and is left untouched."""
        self._logger.info(
            "fixture_user_already_exists",
            username=username,
            account_id=account_id,
            **self._get_context_kwargs(),
        )

    def fixture_user_creating(self, username: str) -> None:
        """Record the start of account creation."""
        self._logger.info(
            "fixture_user_creating",
            username=username,
            **self._get_context_kwargs(),
        )

    def fixture_user_created(self, username: str, account_id: AccountId) -> None:
        """Record the created account with its id."""
        self._logger.info(
            "fixture_user_created",
            username=username,
            account_id=account_id,
            **self._get_context_kwargs(),
        )

    def fixture_user_rejected(self, username: str) -> None:
        """Record that the store did not save the account."""
        self._logger.warning(
            "fixture_user_rejected",
            username=username,
            **self._get_context_kwargs(),
        )

    def fixture_user_creation_failed(self, username: str, error: str) -> None:
        """Record the error raised while creating the account."""
        self._logger.error(
            "fixture_user_creation_failed",
            username=username,
            error=error,
            **self._get_context_kwargs(),
        )

    def fixture_user_deleted(self, username: str, account_id: AccountId) -> None:
        """Record the deleted account with its id."""
        self._logger.info(
            "fixture_user_deleted",
            username=username,
            account_id=account_id,
            **self._get_context_kwargs(),
        )

    def fixture_user_already_absent(self, username: str) -> None:
        """Record that no account existed to delete."""
        self._logger.debug(
            "fixture_user_already_absent",
            username=username,
            **self._get_context_kwargs(),
        )

    def fixture_user_deletion_failed(self, username: str, error: str) -> None:
        """Record the error raised while deleting the account."""
        self._logger.error(
            "fixture_user_deletion_failed",
            username=username,
            error=error,
            **self._get_context_kwargs(),
        )
