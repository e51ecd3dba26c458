"""
User model with role management.
Accounts are authenticated externally; no password is stored here.
"""

from sqlalchemy import String, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
import enum
from typing import Optional


class UserRole(str, enum.Enum):
    """User role enumeration for role-based access control."""
    USER = "user"
    AGENT = "agent"
    ADMIN = "admin"
    FRAUD = "fraud"


class User(Base):
    """
    Marketplace account.
    The role decides what the account may do: buyers are plain users, agents
    list properties, admins moderate, and fraud marks a banned agent.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - must be unique"
    )

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name"
    )

    photo_url: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True,
        comment="Profile photo URL"
    )

    uid: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Identifier issued by the external auth provider"
    )

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole),
        nullable=False,
        default=UserRole.USER,
        index=True,
        comment="User role for access control"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
