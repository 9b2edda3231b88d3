"""Fixture lifecycle service for the fixture users context.

Reconciles the declared fixture users against the identity store: accounts
are created when missing and deleted when present. Both directions are
idempotent and never modify an account that this service did not build.
"""

from __future__ import annotations

from fixture_users.application.observability import (
    DefaultFixtureLifecycleProbe,
    FixtureLifecycleProbe,
)
from fixture_users.application.value_objects import (
    ReconciliationOutcome,
    ReconciliationResult,
)
from fixture_users.domain import FieldValueAdapter, FixtureRegistry, FixtureUser
from fixture_users.ports import IIdentityStore, MutableAccount

# Account fields that carry the application language.
LANGUAGE_FIELDS = ("langcode", "preferred_langcode", "preferred_admin_langcode")


class FixtureLifecycleService:
    """Create-all / delete-all reconciliation of fixture users.

    Users are processed one at a time in declaration order. A failure while
    handling one user is contained: it is recorded in that user's result
    and logged, and processing continues with the next user.

    The service does not decide whether creation or deletion should happen
    for a suite; callers check the suite configuration before calling it.
    """

    def __init__(
        self,
        registry: FixtureRegistry,
        identity_store: IIdentityStore,
        field_adapter: FieldValueAdapter | None = None,
        probe: FixtureLifecycleProbe | None = None,
    ):
        """Initialize FixtureLifecycleService with dependencies.

        Args:
            registry: Registry owning the declared fixture users
            identity_store: The application's user store
            field_adapter: Adapter for typed custom field values
            probe: Optional domain probe for observability
        """
        self._registry = registry
        self._identity_store = identity_store
        self._field_adapter = field_adapter or FieldValueAdapter()
        self._probe = probe or DefaultFixtureLifecycleProbe()

    def create_all(self) -> list[ReconciliationResult]:
        """Ensure every declared fixture user exists in the identity store.

        Returns:
            One result per declared user, in declaration order
        """
        return [self.create_user(user) for user in self._registry]

    def delete_all(self) -> list[ReconciliationResult]:
        """Remove every declared fixture user from the identity store.

        Returns:
            One result per declared user, in declaration order
        """
        return [self.delete_user(user) for user in self._registry]

    def create_user(self, user: FixtureUser) -> ReconciliationResult:
        """Ensure one fixture user exists (find-or-create).

        An account that already exists is only looked up: its id is recorded
        and nothing about it is changed.

        Args:
            user: The declared fixture user

        Returns:
            The reconciliation result for the user
        """
        try:
            existing = self._identity_store.find_by_name(user.name)
            if existing is not None:
                user.mark_existing(existing.id)
                self._probe.fixture_user_already_exists(
                    username=user.name,
                    account_id=existing.id,
                )
                return ReconciliationResult(
                    username=user.name,
                    outcome=ReconciliationOutcome.ALREADY_EXISTS,
                    account_id=existing.id,
                )

            self._probe.fixture_user_creating(username=user.name)
            account = self._build_account(user)
            saved = self._identity_store.persist(account)

        except Exception as e:
            self._probe.fixture_user_creation_failed(username=user.name, error=str(e))
            return ReconciliationResult(
                username=user.name,
                outcome=ReconciliationOutcome.FAILED,
                error=str(e),
            )

        if not saved or account.id is None:
            self._probe.fixture_user_rejected(username=user.name)
            return ReconciliationResult(
                username=user.name,
                outcome=ReconciliationOutcome.REJECTED,
            )

        user.mark_created(account.id)
        self._probe.fixture_user_created(username=user.name, account_id=account.id)
        return ReconciliationResult(
            username=user.name,
            outcome=ReconciliationOutcome.CREATED,
            account_id=account.id,
        )

    def delete_user(self, user: FixtureUser) -> ReconciliationResult:
        """Delete one fixture user's account if it exists.

        Args:
            user: The declared fixture user

        Returns:
            The reconciliation result for the user
        """
        try:
            existing = self._identity_store.find_by_name(user.name)
            if existing is None:
                self._probe.fixture_user_already_absent(username=user.name)
                return ReconciliationResult(
                    username=user.name,
                    outcome=ReconciliationOutcome.ALREADY_ABSENT,
                )

            self._identity_store.delete_by_id(existing.id)

        except Exception as e:
            self._probe.fixture_user_deletion_failed(username=user.name, error=str(e))
            return ReconciliationResult(
                username=user.name,
                outcome=ReconciliationOutcome.FAILED,
                error=str(e),
            )

        user.mark_deleted()
        self._probe.fixture_user_deleted(username=user.name, account_id=existing.id)
        return ReconciliationResult(
            username=user.name,
            outcome=ReconciliationOutcome.DELETED,
            account_id=existing.id,
        )

    def _build_account(self, user: FixtureUser) -> MutableAccount:
        """Build the new identity store account for a fixture user.

        Args:
            user: The declared fixture user

        Returns:
            An activated account ready to persist

        Raises:
            ValueError: If a typed custom field value cannot be adapted
        """
        language = self._identity_store.current_language()
        account = self._identity_store.create_account()

        account.set_password(user.password)
        account.set_email(user.email)
        account.set_username(user.name)

        account.set("init", user.email)
        for field_name in LANGUAGE_FIELDS:
            account.set(field_name, language)

        for role in sorted(user.roles):
            account.add_role(role)

        for field_name, raw_value in user.custom_fields.items():
            account.set(field_name, self._field_adapter.prepare(raw_value))

        account.activate()
        return account
