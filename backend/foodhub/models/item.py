"""
FoodHub Backend — Item SQLAlchemy Model
=========================================

What:  ORM model for the `items` table (inventory items).
Who:   Used by ItemService.

An item references its category by id. The reference is checked once, at
creation time, by ItemService; updates write category_id verbatim.
The `category` relationship is only read when the query eager-loads it
(selectinload), never lazily, because lazy loads are not allowed on an
AsyncSession.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodhub.database import Base
from foodhub.models.category import Category


class Item(Base):
    __tablename__ = "items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    category: Mapped[Category] = relationship(lazy="raise")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name='{self.name}', category_id={self.category_id})>"
