"""SQLAlchemy implementation of IIdentityStore.

Keeps accounts in the users/user_roles/user_fields tables. Every call opens
its own short-lived session, so each lookup, save or delete is a single
atomic request against the database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from fixture_users.infrastructure.models import (
    AccountFieldModel,
    AccountModel,
    AccountRoleModel,
)
from fixture_users.infrastructure.observability import (
    DefaultIdentityStoreProbe,
    IdentityStoreProbe,
)
from fixture_users.infrastructure.security import hash_password, verify_password
from fixture_users.ports.identity_store import IIdentityStore
from infrastructure.database.models import Base

# Fields stored as columns of the users table; everything else is a custom field.
BASE_FIELDS = frozenset(
    {"init", "langcode", "preferred_langcode", "preferred_admin_langcode"}
)


@dataclass(frozen=True)
class StoredAccount:
    """Read model of an account loaded from the users tables."""

    id: int
    name: str
    email: str
    active: bool
    langcode: str
    roles: frozenset[str] = frozenset()
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass
class PendingAccount:
    """A new account collected in memory until the store persists it."""

    id: int | None = None
    username: str = ""
    email: str = ""
    password: str = ""
    active: bool = False
    roles: list[str] = field(default_factory=list)
    base_fields: dict[str, Any] = field(default_factory=dict)
    custom_fields: dict[str, Any] = field(default_factory=dict)

    def set_password(self, password: str) -> None:
        self.password = password

    def set_email(self, email: str) -> None:
        self.email = email

    def set_username(self, username: str) -> None:
        self.username = username

    def set(self, field_name: str, value: Any) -> None:
        if field_name in BASE_FIELDS:
            self.base_fields[field_name] = value
        else:
            self.custom_fields[field_name] = value

    def add_role(self, role: str) -> None:
        if role not in self.roles:
            self.roles.append(role)

    def activate(self) -> None:
        self.active = True


class SQLAlchemyIdentityStore(IIdentityStore):
    """SQL-backed identity store for fixture accounts.

    Passwords are stored as bcrypt hashes. A new account whose name is empty
    or already taken is rejected (persist returns False); any other database
    error propagates to the caller.
    """

    def __init__(
        self,
        engine: Engine,
        langcode: str = "en",
        bcrypt_rounds: int = 12,
        probe: IdentityStoreProbe | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            engine: Engine connected to the user database
            langcode: Language code reported by current_language()
            bcrypt_rounds: bcrypt work factor for stored passwords
            probe: Optional domain probe for observability
        """
        self._engine = engine
        self._session_factory = sessionmaker(engine, expire_on_commit=False)
        self._langcode = langcode
        self._bcrypt_rounds = bcrypt_rounds
        self._probe = probe or DefaultIdentityStoreProbe()

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        """Create the user tables if they do not exist."""
        Base.metadata.create_all(
            self._engine,
            tables=[
                AccountModel.__table__,
                AccountRoleModel.__table__,
                AccountFieldModel.__table__,
            ],
        )
        self._probe.schema_created(
            self._engine.url.render_as_string(hide_password=True)
        )

    def current_language(self) -> str:
        return self._langcode

    def find_by_name(self, name: str) -> StoredAccount | None:
        """Retrieve an account with its roles and custom fields.

        Args:
            name: The account name

        Returns:
            The account, or None if not found
        """
        with self._session_factory() as session:
            model = session.scalars(
                select(AccountModel).where(AccountModel.name == name)
            ).one_or_none()

            if model is None:
                return None

            return self._to_stored_account(session, model)

    def create_account(self) -> PendingAccount:
        return PendingAccount()

    def persist(self, account: PendingAccount) -> bool:
        """Save a new account with its roles and custom fields.

        Args:
            account: The account built through create_account()

        Returns:
            True if saved, False if the name is empty or already taken
        """
        if not account.username:
            self._probe.account_rejected(name=account.username, reason="empty name")
            return False

        password_hash = hash_password(account.password, rounds=self._bcrypt_rounds)
        langcode = account.base_fields.get("langcode", self._langcode)

        with self._session_factory() as session:
            try:
                with session.begin():
                    model = AccountModel(
                        name=account.username,
                        password_hash=password_hash,
                        mail=account.email,
                        init=account.base_fields.get("init", account.email),
                        langcode=langcode,
                        preferred_langcode=account.base_fields.get(
                            "preferred_langcode", langcode
                        ),
                        preferred_admin_langcode=account.base_fields.get(
                            "preferred_admin_langcode", langcode
                        ),
                        status=account.active,
                    )
                    session.add(model)
                    session.flush()

                    session.add_all(
                        AccountRoleModel(uid=model.uid, role=role)
                        for role in account.roles
                    )
                    session.add_all(
                        AccountFieldModel(uid=model.uid, field_name=name, value=value)
                        for name, value in account.custom_fields.items()
                    )
            except IntegrityError as e:
                self._probe.account_rejected(name=account.username, reason=str(e.orig))
                return False

        account.id = model.uid
        self._probe.account_persisted(account_id=model.uid, name=account.username)
        return True

    def delete_by_id(self, account_id: int) -> None:
        """Delete an account together with its role and field rows.

        Args:
            account_id: uid of the account
        """
        with self._session_factory() as session, session.begin():
            session.execute(
                delete(AccountRoleModel).where(AccountRoleModel.uid == account_id)
            )
            session.execute(
                delete(AccountFieldModel).where(AccountFieldModel.uid == account_id)
            )
            session.execute(delete(AccountModel).where(AccountModel.uid == account_id))

        self._probe.account_deleted(account_id=account_id)

    def verify_password(self, name: str, password: str) -> bool:
        """Check a plaintext password against the stored hash of an account.

        Returns:
            True if the account exists and the password matches
        """
        with self._session_factory() as session:
            password_hash = session.scalars(
                select(AccountModel.password_hash).where(AccountModel.name == name)
            ).one_or_none()

        if password_hash is None:
            return False
        return verify_password(password, password_hash)

    @staticmethod
    def _to_stored_account(session: Session, model: AccountModel) -> StoredAccount:
        roles = session.scalars(
            select(AccountRoleModel.role).where(AccountRoleModel.uid == model.uid)
        ).all()
        fields = session.execute(
            select(AccountFieldModel.field_name, AccountFieldModel.value).where(
                AccountFieldModel.uid == model.uid
            )
        ).all()

        return StoredAccount(
            id=model.uid,
            name=model.name,
            email=model.mail,
            active=model.status,
            langcode=model.langcode,
            roles=frozenset(roles),
            fields={name: value for name, value in fields},
        )
