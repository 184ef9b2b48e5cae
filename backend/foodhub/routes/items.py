"""
FoodHub Backend — Item Route Handlers
=======================================

What:  Inventory item endpoints under /api/item and /api/items.
Auth:  None of these routes require a token.

Note on GET /api/items/category/{categoryId}:
    An empty result is answered with 404 and an `items: []` field next to
    the usual error keys, so clients can treat the body as a list result.
    The path parameter is taken as a string; a malformed id is a 400.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from foodhub.database import get_db_session
from foodhub.schemas.common import ErrorResponse, MessageResponse
from foodhub.schemas.inventory import (
    ItemCreate,
    ItemCreatedResponse,
    ItemResponse,
    ItemUpdate,
    ItemWithCategory,
)
from foodhub.services.inventory_service import item_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Items"])

_NOT_FOUND = {404: {"description": "Item not found", "model": ErrorResponse}}


@router.post(
    "/item",
    status_code=201,
    response_model=ItemCreatedResponse,
    responses={400: {"description": "Invalid category ID", "model": ErrorResponse}},
    summary="Create an inventory item",
)
async def create_item(
    payload: ItemCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ItemCreatedResponse:
    item = await item_service.create_item(db, payload)
    return ItemCreatedResponse(saved_item=item)


@router.get(
    "/items",
    response_model=List[ItemWithCategory],
    summary="List all items with their category",
)
async def list_items(db: AsyncSession = Depends(get_db_session)) -> List[ItemWithCategory]:
    return await item_service.list_items(db)


@router.get(
    "/item/{item_id}",
    response_model=ItemResponse,
    responses=_NOT_FOUND,
    summary="Get an item by ID",
)
async def get_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> ItemResponse:
    return await item_service.get_item(db, item_id)


@router.get(
    "/items/category/{category_id}",
    response_model=List[ItemWithCategory],
    responses={
        400: {"description": "Invalid category ID", "model": ErrorResponse},
        404: {"description": "No items in this category"},
    },
    summary="List the items of one category",
)
async def list_items_by_category(
    category_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
):
    items = await item_service.list_items_by_category(db, category_id)
    if not items:
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": "No items found for this category",
                "items": [],
                "request_id": getattr(request.state, "request_id", None),
            },
        )
    return items


@router.put(
    "/item/{item_id}",
    response_model=ItemResponse,
    responses={**_NOT_FOUND, 400: {"description": "Invalid input", "model": ErrorResponse}},
    summary="Update an item by ID",
)
async def update_item(
    item_id: UUID,
    payload: ItemUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ItemResponse:
    return await item_service.update_item(db, item_id, payload)


@router.delete(
    "/item/{item_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete an item by ID",
)
async def delete_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await item_service.delete_item(db, item_id)
    return MessageResponse(message="Item deleted")
