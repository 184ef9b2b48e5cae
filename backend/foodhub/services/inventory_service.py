"""
FoodHub Backend — Inventory Service (Categories & Items)
==========================================================

What:  Category creation/listing and item CRUD.
Who:   Called by the /api/category and /api/item(s) route handlers.

Category reference rules:
    - create_item(): categoryId must parse as a UUID AND resolve to an
      existing category; otherwise "Invalid category ID" (400) and nothing
      is written.
    - update_item(): supplied fields are written verbatim with no category
      re-check; a dangling id is only caught by the foreign key (PostgreSQL),
      which is reported the same way.
    - Listing endpoints eager-load the category so each item carries it inline.
"""

import logging
import uuid
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from foodhub.exceptions import (
    DatabaseError,
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
)
from foodhub.models.category import Category
from foodhub.models.item import Item
from foodhub.pagination import build_pagination, offset_for
from foodhub.schemas.inventory import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    ItemCreate,
    ItemResponse,
    ItemUpdate,
    ItemWithCategory,
)

logger = logging.getLogger(__name__)


def parse_category_id(raw: str) -> uuid.UUID:
    """Parse a category id from user input, rejecting malformed values."""
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise ValidationError(
            message="Invalid category ID",
            field="categoryId",
            context={"value": raw},
        )


class CategoryService:
    async def create_category(
        self,
        db: AsyncSession,
        payload: CategoryCreate,
    ) -> CategoryResponse:
        """
        Create a category with a unique name.

        Raises:
            DuplicateKeyError: a category with this name already exists
        """
        result = await db.execute(
            select(Category).where(Category.category_name == payload.category_name)
        )
        if result.scalars().first() is not None:
            raise DuplicateKeyError(message="Category already exists", field="categoryName")

        category = Category(category_name=payload.category_name)
        db.add(category)
        try:
            await db.flush()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same name
            raise DuplicateKeyError(message="Category already exists", field="categoryName")

        logger.info("Category created: %s (%s)", category.id, category.category_name)
        return CategoryResponse.model_validate(category)

    async def list_categories(
        self,
        db: AsyncSession,
        page: int = 1,
        limit: int = 10,
    ) -> CategoryListResponse:
        try:
            result = await db.execute(
                select(Category)
                .order_by(Category.created_at, Category.id)
                .offset(offset_for(page, limit))
                .limit(limit)
            )
            categories = list(result.scalars().all())

            count_result = await db.execute(select(func.count(Category.id)))
            total_count = count_result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e))
            raise DatabaseError(
                message="Failed to fetch categories",
                context={"error_type": type(e).__name__},
            )

        return CategoryListResponse(
            categories=[CategoryResponse.model_validate(c) for c in categories],
            pagination=build_pagination(page, limit, total_count),
        )


class ItemService:
    async def create_item(self, db: AsyncSession, payload: ItemCreate) -> ItemResponse:
        """
        Create an item after confirming its category exists.

        Raises:
            ValidationError: categoryId malformed or unknown
        """
        category_id = parse_category_id(payload.category_id)
        category = await db.get(Category, category_id)
        if category is None:
            raise ValidationError(
                message="Invalid category ID",
                field="categoryId",
                context={"value": payload.category_id},
            )

        item = Item(
            name=payload.name,
            description=payload.description,
            quantity=payload.quantity,
            category_id=category.id,
        )
        db.add(item)
        await self._flush(db, action="create item")

        logger.info("Item created: %s in category %s", item.id, category.id)
        return ItemResponse.model_validate(item)

    async def list_items(self, db: AsyncSession) -> List[ItemWithCategory]:
        result = await db.execute(
            select(Item)
            .options(selectinload(Item.category))
            .order_by(Item.created_at, Item.id)
        )
        return [ItemWithCategory.model_validate(item) for item in result.scalars().all()]

    async def get_item(self, db: AsyncSession, item_id: uuid.UUID) -> ItemResponse:
        item = await self._get_or_404(db, item_id)
        return ItemResponse.model_validate(item)

    async def list_items_by_category(
        self,
        db: AsyncSession,
        raw_category_id: str,
    ) -> List[ItemWithCategory]:
        """
        Items belonging to one category, each with the category inline.

        An empty list is returned as-is; the route reports it as 404.

        Raises:
            ValidationError: raw_category_id is not a well-formed id
        """
        category_id = parse_category_id(raw_category_id)
        result = await db.execute(
            select(Item)
            .where(Item.category_id == category_id)
            .options(selectinload(Item.category))
            .order_by(Item.created_at, Item.id)
        )
        return [ItemWithCategory.model_validate(item) for item in result.scalars().all()]

    async def update_item(
        self,
        db: AsyncSession,
        item_id: uuid.UUID,
        payload: ItemUpdate,
    ) -> ItemResponse:
        item = await self._get_or_404(db, item_id)
        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(item, field, value)

        await self._flush(db, action="update item")
        logger.info("Item %s updated", item.id)
        return ItemResponse.model_validate(item)

    async def delete_item(self, db: AsyncSession, item_id: uuid.UUID) -> None:
        item = await self._get_or_404(db, item_id)
        await db.delete(item)
        await self._flush(db, action="delete item")
        logger.info("Item %s deleted", item_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_404(self, db: AsyncSession, item_id: uuid.UUID) -> Item:
        item = await db.get(Item, item_id)
        if item is None:
            raise NotFoundError(resource="item", resource_id=str(item_id))
        return item

    async def _flush(self, db: AsyncSession, action: str) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            # The only constraint an item write can break is the category FK
            logger.warning("Integrity error during %s: %s", action, e.orig)
            raise ValidationError(message="Invalid category ID", field="categoryId")
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", action, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to {action}",
                context={"error_type": type(e).__name__},
            )


category_service = CategoryService()
item_service = ItemService()
