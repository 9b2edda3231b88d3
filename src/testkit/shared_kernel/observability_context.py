"""Observation context bound to domain probes.

Carries run-level metadata (run id, suite name) so that every structured
log record emitted during a test run can be correlated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ulid import ULID


@dataclass(frozen=True)
class ObservationContext:
    """Run-level metadata attached to probe events."""

    run_id: str
    suite: str | None = None

    @classmethod
    def for_run(cls, suite: str | None = None) -> ObservationContext:
        """Create a context for a new test run with a fresh ULID run id."""
        return cls(run_id=str(ULID()), suite=suite)

    def as_dict(self) -> dict[str, Any]:
        """Return the context as logging kwargs, omitting unset values."""
        context: dict[str, Any] = {"run_id": self.run_id}
        if self.suite is not None:
            context["suite"] = self.suite
        return context
