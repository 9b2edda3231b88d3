"""SQLAlchemy ORM models for the SQL identity store.

The layout follows the user tables of a typical content-management
application: base account columns, one row per granted role and one row
per custom profile field.
"""

from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class AccountModel(Base, TimestampMixin):
    """ORM model for the users table."""

    __tablename__ = "users"

    uid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column("pass", String(255), nullable=False)
    mail: Mapped[str] = mapped_column(String(254), nullable=False, default="")
    init: Mapped[str] = mapped_column(String(254), nullable=False, default="")
    langcode: Mapped[str] = mapped_column(String(12), nullable=False)
    preferred_langcode: Mapped[str] = mapped_column(String(12), nullable=False)
    preferred_admin_langcode: Mapped[str] = mapped_column(String(12), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<AccountModel(uid={self.uid}, name={self.name})>"


class AccountRoleModel(Base):
    """ORM model for the user_roles table (one row per granted role)."""

    __tablename__ = "user_roles"

    uid: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.uid", ondelete="CASCADE"), primary_key=True
    )
    role: Mapped[str] = mapped_column(String(64), primary_key=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<AccountRoleModel(uid={self.uid}, role={self.role})>"


class AccountFieldModel(Base):
    """ORM model for the user_fields table (custom profile field values)."""

    __tablename__ = "user_fields"

    uid: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.uid", ondelete="CASCADE"), primary_key=True
    )
    field_name: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<AccountFieldModel(uid={self.uid}, field_name={self.field_name})>"
