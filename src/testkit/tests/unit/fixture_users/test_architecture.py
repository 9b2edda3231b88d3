"""Architecture tests for the fixture users bounded context.

These tests enforce the layering of the context: the domain depends on
nothing but itself and the shared kernel, the application layer talks to
the identity store only through its port, and nothing below presentation
knows about the test framework.
"""

from pytest_archon import archrule


class TestFixtureUsersLayering:
    """Tests that each layer only imports the layers beneath it."""

    def test_domain_does_not_import_outer_layers(self):
        """The domain holds the fixture model and must stay framework free."""
        (
            archrule("domain_is_innermost")
            .match("fixture_users.domain*")
            .should_not_import("fixture_users.application*")
            .should_not_import("fixture_users.infrastructure*")
            .should_not_import("fixture_users.presentation*")
            .should_not_import("infrastructure*")
            .should_not_import("sqlalchemy*")
            .should_not_import("pytest*")
            .check("fixture_users")
        )

    def test_ports_do_not_import_implementations(self):
        """Ports describe the identity store without depending on one."""
        (
            archrule("ports_are_abstract")
            .match("fixture_users.ports*")
            .should_not_import("fixture_users.infrastructure*")
            .should_not_import("sqlalchemy*")
            .check("fixture_users")
        )

    def test_application_does_not_import_infrastructure(self):
        """Lifecycle reconciliation works against the port only."""
        (
            archrule("application_uses_ports")
            .match("fixture_users.application*")
            .should_not_import("fixture_users.infrastructure*")
            .should_not_import("fixture_users.presentation*")
            .should_not_import("sqlalchemy*")
            .check("fixture_users")
        )

    def test_only_presentation_imports_pytest(self):
        """The pytest plugin is the only seam to the test framework."""
        (
            archrule("pytest_only_in_presentation")
            .match("fixture_users.*")
            .exclude("fixture_users.presentation*")
            .should_not_import("pytest*")
            .check("fixture_users")
        )


class TestSharedKernelIsolation:
    """Tests that the shared kernel stays independent of the context."""

    def test_shared_kernel_does_not_import_fixture_users(self):
        """Shared kernel code is reused by every context."""
        (
            archrule("shared_kernel_independent")
            .match("shared_kernel*")
            .should_not_import("fixture_users*")
            .check("shared_kernel")
        )
