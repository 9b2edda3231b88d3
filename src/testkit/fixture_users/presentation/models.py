"""Pydantic model of the suite configuration options."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


class SuiteConfig(BaseModel):
    """Recognized options of the fixture users suite configuration.

    ``users`` is kept as raw declarations: individual entries are turned into
    fixture users by the registry. A ``users`` value that is not a list is
    treated as absent so that suites without declared users stay valid.

    ``create`` and ``delete`` only accept real booleans: a quoted "yes" or a
    1 is a validation error, not an instruction to create or delete.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    users: list[Any] | None = Field(
        default=None, description="Declared fixture users"
    )
    default_pass: str = Field(
        default="",
        alias="defaultPass",
        description="Password for users that declare none",
    )
    create: StrictBool = Field(
        default=False, description="Create all declared users before the suite"
    )
    delete: StrictBool = Field(
        default=False, description="Delete all declared users after the suite"
    )

    @field_validator("users", mode="before")
    @classmethod
    def _ignore_malformed_users(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None

    @field_validator("default_pass", mode="before")
    @classmethod
    def _null_default_pass(cls, value: Any) -> Any:
        return "" if value is None else str(value)
