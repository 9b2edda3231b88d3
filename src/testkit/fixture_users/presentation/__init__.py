"""Presentation layer: the surface offered to test frameworks."""

from fixture_users.presentation.models import SuiteConfig
from fixture_users.presentation.suite_module import FixtureUsersModule

__all__ = [
    "FixtureUsersModule",
    "SuiteConfig",
]
