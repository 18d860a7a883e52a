"""SQLAlchemy models for users, roles and their association."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from warden_accounts.infrastructure.persistence.sqlalchemy.base import AccountsBase

user_roles = Table(
    "user_roles",
    AccountsBase.metadata,
    Column("user_id", ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", ForeignKey("roles.role_id"), primary_key=True),
)


class RoleModel(AccountsBase):
    __tablename__ = "roles"

    role_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<RoleModel(role_id={self.role_id}, name={self.name})>"


class UserModel(AccountsBase):
    """SQLAlchemy model for persisting Identity aggregates."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    roles: Mapped[list[RoleModel]] = relationship(secondary=user_roles, lazy="selectin")

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, username={self.username})>"
