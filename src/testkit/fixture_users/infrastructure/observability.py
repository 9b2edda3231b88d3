"""Domain probe for identity store operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the SQL identity store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IdentityStoreProbe(Protocol):
    """Domain probe for identity store operations."""

    def account_persisted(self, account_id: int, name: str) -> None:
        """Record that a new account was saved."""
        ...

    def account_rejected(self, name: str, reason: str) -> None:
        """Record that a new account was refused without raising."""
        ...

    def account_deleted(self, account_id: int) -> None:
        """Record that an account and its role/field rows were removed."""
        ...

    def schema_created(self, url: str) -> None:
        """Record that the user tables were created."""
        ...

    def with_context(self, context: ObservationContext) -> IdentityStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentityStoreProbe:
    """Default implementation of IdentityStoreProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultIdentityStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultIdentityStoreProbe(logger=self._logger, context=context)

    def account_persisted(self, account_id: int, name: str) -> None:
        self._logger.debug(
            "identity_store_account_persisted",
            account_id=account_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def account_rejected(self, name: str, reason: str) -> None:
        self._logger.warning(
            "identity_store_account_rejected",
            name=name,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def account_deleted(self, account_id: int) -> None:
        self._logger.debug(
            "identity_store_account_deleted",
            account_id=account_id,
            **self._get_context_kwargs(),
        )

    def schema_created(self, url: str) -> None:
        self._logger.info(
            "identity_store_schema_created",
            url=url,
            **self._get_context_kwargs(),
        )
