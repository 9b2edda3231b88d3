"""Unit tests for FixtureRegistry."""

from unittest.mock import Mock

import pytest

from fixture_users.domain import (
    FixtureConfigError,
    FixtureRegistry,
    FixtureUser,
    FixtureUserNotFoundError,
)
from fixture_users.domain.observability import RegistryProbe


@pytest.fixture
def mock_probe():
    return Mock(spec=RegistryProbe)


@pytest.fixture
def registry(sample_users_config, mock_probe):
    return FixtureRegistry.build(sample_users_config, probe=mock_probe)


class TestFixtureRegistryBuild:
    """Tests for FixtureRegistry.build()."""

    def test_builds_users_in_declaration_order(self, registry):
        """Users should be kept in the order they were declared."""
        assert [user.name for user in registry] == ["alice", "bob", "carol"]
        assert len(registry) == 3

    def test_applies_default_pass(self):
        """Entries without a pass should receive the suite default."""
        registry = FixtureRegistry.build(
            [{"name": "alice", "pass": "own"}, {"name": "bob"}],
            default_pass="shared",
        )

        assert registry.by_name("alice").password == "own"
        assert registry.by_name("bob").password == "shared"

    def test_probe_records_each_registration(self, registry, mock_probe):
        """Every new name should be reported with its sorted roles."""
        assert mock_probe.fixture_user_registered.call_count == 3
        mock_probe.fixture_user_registered.assert_any_call(
            "bob", ["author", "editor"]
        )

    @pytest.mark.parametrize("config_users", [None, {"name": "alice"}, "alice", 42])
    def test_missing_or_malformed_users_give_empty_registry(
        self, config_users, mock_probe
    ):
        """Anything that is not a list of entries yields an empty registry."""
        registry = FixtureRegistry.build(config_users, probe=mock_probe)

        assert len(registry) == 0
        mock_probe.fixture_users_not_configured.assert_called_once()

    def test_empty_list_is_not_reported_as_missing(self, mock_probe):
        """An explicitly empty users list is a valid configuration."""
        registry = FixtureRegistry.build([], probe=mock_probe)

        assert len(registry) == 0
        mock_probe.fixture_users_not_configured.assert_not_called()

    def test_duplicate_name_replaces_and_keeps_position(self, mock_probe):
        """A later declaration overwrites the earlier one in place."""
        registry = FixtureRegistry.build(
            [
                {"name": "bob", "email": "first@x.test"},
                {"name": "carol"},
                {"name": "bob", "email": "second@x.test"},
            ],
            probe=mock_probe,
        )

        assert [user.name for user in registry] == ["bob", "carol"]
        assert registry.by_name("bob").email == "second@x.test"
        mock_probe.fixture_user_replaced.assert_called_once_with("bob")

    def test_malformed_entry_raises(self):
        """An entry without a name aborts the build."""
        with pytest.raises(FixtureConfigError):
            FixtureRegistry.build([{"name": "alice"}, {"roles": ["editor"]}])


class TestFixtureRegistryLookup:
    """Tests for by_name(), by_roles() and all()."""

    def test_by_name_returns_user(self, registry):
        """Declared users should be found by name."""
        user = registry.by_name("carol")

        assert user.name == "carol"
        assert user.roles == frozenset({"administrator"})

    def test_by_name_returns_same_entity(self, registry):
        """Lookups should return the owned entity, not a copy."""
        assert registry.by_name("alice") is registry.by_name("alice")

    def test_by_name_unknown_raises(self, registry):
        """Unknown names should raise FixtureUserNotFoundError."""
        with pytest.raises(FixtureUserNotFoundError) as exc_info:
            registry.by_name("mallory")

        assert exc_info.value.name == "mallory"
        assert "mallory" in str(exc_info.value)

    def test_not_found_is_lookup_error(self):
        """Callers can catch the not-found error as LookupError."""
        assert issubclass(FixtureUserNotFoundError, LookupError)

    def test_by_roles_keeps_declaration_order(self, registry):
        """All matching users should be returned in declaration order."""
        users = registry.by_roles(["editor"])

        assert [user.name for user in users] == ["alice", "bob"]

    def test_by_roles_matches_any_role(self, registry):
        """A user matches when it holds any of the requested roles."""
        users = registry.by_roles(["author", "administrator"])

        assert [user.name for user in users] == ["bob", "carol"]

    def test_by_roles_return_one_gives_last_match(self, registry):
        """With return_one only the last matching user is returned."""
        users = registry.by_roles(["editor"], return_one=True)

        assert [user.name for user in users] == ["bob"]

    def test_by_roles_accepts_single_role_string(self, registry):
        """A single role name should not be split into characters."""
        users = registry.by_roles("administrator")

        assert [user.name for user in users] == ["carol"]

    def test_by_roles_without_match_is_empty(self, registry):
        """No match gives an empty list, also with return_one."""
        assert registry.by_roles(["moderator"]) == []
        assert registry.by_roles(["moderator"], return_one=True) == []

    def test_all_returns_read_only_view(self, registry):
        """The full mapping should not allow modification."""
        users = registry.all()

        assert list(users) == ["alice", "bob", "carol"]
        with pytest.raises(TypeError):
            users["mallory"] = FixtureUser(name="mallory")

    def test_contains(self, registry):
        """Membership checks use the user name."""
        assert "alice" in registry
        assert "mallory" not in registry
