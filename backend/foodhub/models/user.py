"""
FoodHub Backend — User SQLAlchemy Model
=========================================

What:  ORM model for the `users` table (the credential store).
Who:   Used by UserService and AuthService.

Table Design:
    - username / email: UNIQUE constraints are the source of truth for
      uniqueness; the service-level pre-check only gives a friendlier message
    - password_hash: bcrypt hash produced by foodhub.security; the plaintext
      password is never stored
    - created_at / updated_at: UTC, timezone-aware
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from foodhub.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered account that can log in and receive bearer tokens."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # 3-30 characters, checked by the request schema
    username: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        unique=True,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # URL of an uploaded profile image (usually /uploads/...)
    profile_pic: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
