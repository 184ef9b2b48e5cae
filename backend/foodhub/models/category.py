"""
FoodHub Backend — Category SQLAlchemy Model
=============================================

What:  ORM model for the `categories` table (inventory grouping).
Who:   Used by CategoryService and referenced by Item.category_id.

Deleting a category is not supported, and items keep a plain reference
(no cascade).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from foodhub.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    category_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
    )

    # Stable ordering for paginated listing
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, category_name='{self.category_name}')>"
