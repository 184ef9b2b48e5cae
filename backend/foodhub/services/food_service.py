"""
FoodHub Backend — Food Service (Catalog Store)
================================================

What:  Create, filtered/paginated listing, lookup, partial update and
       deletion of catalog food items.
Who:   Called by the /api/food route handlers (all bearer-protected).

Listing filter (all conditions ANDed):
    category      → category = :category
    isAvailable   → is_available = (:isAvailable == "true")
    minPrice      → price >= :minPrice
    maxPrice      → price <= :maxPrice

Pagination:
    skip = (page - 1) * limit, take = limit, ordered by created_at then id
    so consecutive pages never overlap.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from foodhub.exceptions import DatabaseError, NotFoundError, ValidationError
from foodhub.models.food import Food
from foodhub.pagination import build_pagination, offset_for
from foodhub.schemas.food import FoodCreate, FoodListResponse, FoodResponse, FoodUpdate

logger = logging.getLogger(__name__)

# Fields that must be present and non-blank on create
REQUIRED_FIELDS = ("name", "price", "image", "category", "ingredients", "rating", "servings")


def _is_blank(value: Any) -> bool:
    # Zero and "" count as missing; an empty ingredient list does not.
    return value is None or value in ("", 0)


def parse_availability(value: Optional[str]) -> Optional[bool]:
    """
    Interpret the isAvailable query parameter.

    Absent or empty → no filter. "true" → True. Any other value → False.
    """
    if not value:
        return None
    return value == "true"


def build_food_filters(
    category: Optional[str] = None,
    is_available: Optional[bool] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[ColumnElement[bool]]:
    """Translate the optional listing parameters into WHERE conditions."""
    conditions: List[ColumnElement[bool]] = []
    if category:
        conditions.append(Food.category == category)
    if is_available is not None:
        conditions.append(Food.is_available == is_available)
    if min_price is not None:
        conditions.append(Food.price >= min_price)
    if max_price is not None:
        conditions.append(Food.price <= max_price)
    return conditions


class FoodService:
    """Business logic layer for catalog food items."""

    async def create_food(self, db: AsyncSession, payload: FoodCreate) -> FoodResponse:
        """
        Add a food item.

        Raises:
            ValidationError: any of REQUIRED_FIELDS missing or blank
        """
        missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(payload, name))]
        if missing:
            raise ValidationError(
                message="Please provide all required fields",
                context={"missing": missing},
            )

        food = Food(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            image=payload.image,
            category=payload.category,
            ingredients=payload.ingredients,
            is_available=True if payload.is_available is None else payload.is_available,
            rating=payload.rating,
            servings=payload.servings,
        )
        db.add(food)
        await self._flush(db, action="add food item")

        logger.info("Food item created: %s (%s)", food.id, food.name)
        return FoodResponse.model_validate(food)

    async def list_food(
        self,
        db: AsyncSession,
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        page: int = 1,
        limit: int = 10,
    ) -> FoodListResponse:
        """Return one page of food items matching every supplied filter."""
        conditions = build_food_filters(category, is_available, min_price, max_price)

        query = (
            select(Food)
            .where(*conditions)
            .order_by(Food.created_at, Food.id)
            .offset(offset_for(page, limit))
            .limit(limit)
        )
        count_query = select(func.count(Food.id)).where(*conditions)

        try:
            result = await db.execute(query)
            items = list(result.scalars().all())

            count_result = await db.execute(count_query)
            total_count = count_result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Database error listing food items: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error fetching food items",
                context={"error_type": type(e).__name__},
            )

        return FoodListResponse(
            food_items=[FoodResponse.model_validate(food) for food in items],
            pagination=build_pagination(page, limit, total_count),
        )

    async def get_food(self, db: AsyncSession, food_id: uuid.UUID) -> FoodResponse:
        food = await self._get_or_404(db, food_id)
        return FoodResponse.model_validate(food)

    async def update_food(
        self,
        db: AsyncSession,
        food_id: uuid.UUID,
        payload: FoodUpdate,
    ) -> FoodResponse:
        """
        Apply the fields present in `payload` and stamp updated_at.

        Raises:
            ValidationError: payload carries no fields
            NotFoundError: no food item with `food_id`
        """
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError(message="No fields to update")

        food = await self._get_or_404(db, food_id)
        for field, value in changes.items():
            setattr(food, field, value)
        food.updated_at = datetime.now(timezone.utc)

        await self._flush(db, action="update food item")
        logger.info("Food item %s updated (fields=%s)", food.id, ",".join(sorted(changes)))
        return FoodResponse.model_validate(food)

    async def delete_food(self, db: AsyncSession, food_id: uuid.UUID) -> None:
        food = await self._get_or_404(db, food_id)
        await db.delete(food)
        await self._flush(db, action="delete food item")
        logger.info("Food item %s deleted", food_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_404(self, db: AsyncSession, food_id: uuid.UUID) -> Food:
        food = await db.get(Food, food_id)
        if food is None:
            raise NotFoundError(resource="food item", resource_id=str(food_id))
        return food

    async def _flush(self, db: AsyncSession, action: str) -> None:
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", action, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Error trying to {action}",
                context={"error_type": type(e).__name__},
            )


food_service = FoodService()
