"""
FoodHub Backend — Food SQLAlchemy Model
=========================================

What:  ORM model for the `food_items` table (the food catalog).
Who:   Used by FoodService for create, filtered listing, and partial updates.

Column notes:
    - category: one of FOOD_CATEGORIES; the request schema rejects anything else
    - ingredients: ordered list of strings stored as a JSON array
    - rating: bounded to [1, 5] by a CHECK constraint and by the schema
    - updated_at: stamped explicitly by FoodService.update_food()

Query Patterns:
    - Filtered list: WHERE category = ? AND is_available = ? AND price BETWEEN ? AND ?
      ORDER BY created_at, id LIMIT ? OFFSET ?
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from foodhub.database import Base

FOOD_CATEGORIES = ("vegetarian", "non-vegetarian", "vegan", "dessert")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Food(Base):
    """A dish offered in the catalog."""

    __tablename__ = "food_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)

    # Image URL, typically returned by POST /api/upload
    image: Mapped[str] = mapped_column(String(500), nullable=False)

    category: Mapped[str] = mapped_column(String(32), nullable=False)
    ingredients: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=5)
    servings: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

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

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_food_items_rating_range"),
        Index("idx_food_items_category", "category"),
        Index("idx_food_items_price", "price"),
    )

    def __repr__(self) -> str:
        return f"<Food(id={self.id}, name='{self.name}', category='{self.category}')>"
