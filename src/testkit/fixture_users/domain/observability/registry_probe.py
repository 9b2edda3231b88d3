"""Observability probes for the fixture registry.

Domain probes for FixtureRegistry following the Domain Oriented Observability
pattern. Probes emit structured logs for registry construction events.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RegistryProbe(Protocol):
    """Domain probe for fixture registry operations."""

    def fixture_users_not_configured(self) -> None:
        """Probe emitted when the suite config declares no usable users list."""
        ...

    def fixture_user_registered(self, username: str, roles: list[str]) -> None:
        """Probe emitted when a fixture user is added to the registry.

        Args:
            username: The fixture user name
            roles: Declared roles, sorted
        """
        ...

    def fixture_user_replaced(self, username: str) -> None:
        """Probe emitted when a later declaration overwrites an earlier one."""
        ...

    def with_context(self, context: ObservationContext) -> RegistryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRegistryProbe:
    """Default implementation of RegistryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRegistryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRegistryProbe(logger=self._logger, context=context)

    def fixture_users_not_configured(self) -> None:
        """Log the missing users declaration."""
        self._logger.warning(
            "fixture_users_not_configured",
            **self._get_context_kwargs(),
        )

    def fixture_user_registered(self, username: str, roles: list[str]) -> None:
        """Log registration with structured context."""
        self._logger.debug(
            "fixture_user_registered",
            username=username,
            roles=roles,
            **self._get_context_kwargs(),
        )

    def fixture_user_replaced(self, username: str) -> None:
        """Log the overwrite of a duplicate declaration."""
        self._logger.info(
            "fixture_user_replaced",
            username=username,
            **self._get_context_kwargs(),
        )
