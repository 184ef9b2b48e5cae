"""
FoodHub Backend — Inventory Schemas (Categories & Items)
==========================================================

ItemCreate takes categoryId as a plain string so ItemService can answer a
malformed id with the same "Invalid category ID" as an unknown one.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from foodhub.schemas.common import CamelModel, Pagination


# ── Categories ───────────────────────────────────────────────────────────


class CategoryCreate(CamelModel):
    category_name: str = Field(min_length=1, max_length=100)


class CategoryResponse(CamelModel):
    id: uuid.UUID
    category_name: str


class CategoryCreatedResponse(CamelModel):
    message: str = "Category created successfully"
    saved_category: CategoryResponse


class CategoryListResponse(CamelModel):
    message: str = "Categories fetched successfully"
    categories: List[CategoryResponse]
    pagination: Pagination


# ── Items ────────────────────────────────────────────────────────────────


class ItemCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    quantity: int = Field(default=0, ge=0)
    category_id: str


class ItemUpdate(CamelModel):
    """Fields present in the body are written as-is; categoryId is not re-checked."""
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[uuid.UUID] = None


class ItemResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    quantity: int
    category_id: uuid.UUID


class ItemWithCategory(ItemResponse):
    """Item with its category resolved inline (listing endpoints)."""
    category: CategoryResponse


class ItemCreatedResponse(CamelModel):
    message: str = "Item created successfully"
    saved_item: ItemResponse
