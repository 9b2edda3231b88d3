"""Integration tests for the fixture lifecycle against the SQL identity store."""

import pytest

from fixture_users.application import ReconciliationOutcome
from fixture_users.domain import FixtureState
from fixture_users.presentation import FixtureUsersModule

pytestmark = pytest.mark.integration


@pytest.fixture
def module(identity_store, sample_users_config):
    module = FixtureUsersModule(identity_store=identity_store)
    module.initialize(
        {
            "users": sample_users_config,
            "defaultPass": "shared-secret",
            "create": True,
            "delete": True,
        }
    )
    return module


class TestCreateDeleteRoundTrip:
    """Tests for before_suite() followed by after_suite()."""

    def test_before_suite_creates_accounts(self, module, identity_store):
        """Every declared user gets an account with its roles."""
        results = module.before_suite()

        assert all(result.ok for result in results)
        bob = identity_store.find_by_name("bob")
        assert bob.roles == frozenset({"author", "editor"})
        assert bob.email == "b@x.test"
        assert bob.active is True
        assert bob.langcode == "de"
        assert module.get_test_user_by_name("bob").resolved_id == bob.id

    def test_typed_custom_field_is_stored_adapted(self, module, identity_store):
        """A date declaration is stored as a Unix timestamp."""
        module.before_suite()

        alice = identity_store.find_by_name("alice")
        assert alice.fields == {"signup_date": 1704067200}

    def test_passwords_follow_declaration_and_default(self, module, identity_store):
        """Declared passwords win over the suite default."""
        module.before_suite()

        assert identity_store.verify_password("alice", "alice-secret")
        assert identity_store.verify_password("bob", "shared-secret")

    def test_after_suite_removes_accounts(self, module):
        """After the suite no declared user is left in the store."""
        module.before_suite()

        results = module.after_suite()

        assert [result.outcome for result in results] == [
            ReconciliationOutcome.DELETED
        ] * 3
        assert not any(module.user_exists(name) for name in ("alice", "bob", "carol"))
        assert all(
            user.state == FixtureState.DELETED
            for user in module.get_all_test_users().values()
        )

    def test_create_is_idempotent(self, module, identity_store):
        """A second creation run finds the same accounts."""
        first = module.before_suite()

        second = module.before_suite()

        assert {result.outcome for result in second} == {
            ReconciliationOutcome.ALREADY_EXISTS
        }
        assert [r.account_id for r in first] == [r.account_id for r in second]

    def test_delete_is_idempotent(self, module):
        """Deleting twice is harmless."""
        module.before_suite()
        module.after_suite()

        results = module.after_suite()

        assert {result.outcome for result in results} == {
            ReconciliationOutcome.ALREADY_ABSENT
        }

    def test_pre_existing_account_is_not_modified(self, module, identity_store):
        """An account created outside the run keeps its data until deletion."""
        other = FixtureUsersModule(identity_store=identity_store)
        other.initialize(
            {
                "users": [{"name": "carol", "email": "old@x.test", "roles": ["x"]}],
                "create": True,
            }
        )
        other.before_suite()

        results = module.before_suite()

        assert results[2].outcome == ReconciliationOutcome.ALREADY_EXISTS
        carol = identity_store.find_by_name("carol")
        assert carol.email == "old@x.test"
        assert carol.roles == frozenset({"x"})


class TestDeclarationEdgeCases:
    """Tests for unusual declarations against the real store."""

    def test_duplicate_declaration_creates_one_account(self, identity_store):
        """The later of two declarations with the same name wins."""
        module = FixtureUsersModule(identity_store=identity_store)
        module.initialize(
            {
                "users": [
                    {"name": "bob", "email": "first@x.test"},
                    {"name": "bob", "email": "second@x.test"},
                ],
                "create": True,
            }
        )

        results = module.before_suite()

        assert len(results) == 1
        assert identity_store.find_by_name("bob").email == "second@x.test"

    def test_unparsable_date_fails_only_that_user(self, identity_store):
        """The other users are still created."""
        module = FixtureUsersModule(identity_store=identity_store)
        module.initialize(
            {
                "users": [
                    {
                        "name": "dave",
                        "custom_fields": {
                            "signup_date": {"type": "date", "value": "someday"}
                        },
                    },
                    {"name": "erin"},
                ],
                "create": True,
            }
        )

        results = module.before_suite()

        assert [result.outcome for result in results] == [
            ReconciliationOutcome.FAILED,
            ReconciliationOutcome.CREATED,
        ]
        assert not module.user_exists("dave")
        assert module.user_exists("erin")

    def test_without_users_nothing_happens(self, identity_store):
        """A suite without declarations leaves the store alone."""
        module = FixtureUsersModule(identity_store=identity_store)
        module.initialize({"create": True, "delete": True})

        assert module.before_suite() == []
        assert module.after_suite() == []
