"""
FoodHub Backend — Category Route Handlers
===========================================

What:  POST /api/category and GET /api/category (paginated); both require a
       bearer token.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from foodhub.database import get_db_session
from foodhub.dependencies import get_current_user_id
from foodhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, MAX_PAGE
from foodhub.schemas.common import ErrorResponse
from foodhub.schemas.inventory import (
    CategoryCreate,
    CategoryCreatedResponse,
    CategoryListResponse,
)
from foodhub.services.inventory_service import category_service

router = APIRouter(
    prefix="/api",
    tags=["Categories"],
    dependencies=[Depends(get_current_user_id)],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
)


@router.post(
    "/category",
    status_code=201,
    response_model=CategoryCreatedResponse,
    responses={400: {"description": "Category already exists", "model": ErrorResponse}},
    summary="Create a category",
)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryCreatedResponse:
    category = await category_service.create_category(db, payload)
    return CategoryCreatedResponse(saved_category=category)


@router.get(
    "/category",
    response_model=CategoryListResponse,
    summary="List categories (paginated)",
)
async def list_categories(
    page: int = Query(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryListResponse:
    return await category_service.list_categories(db, page=page, limit=limit)
