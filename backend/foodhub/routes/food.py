"""
FoodHub Backend — Food Route Handlers
=======================================

What:  /api/food catalog endpoints; all require a bearer token.

Listing example:
    GET /api/food?category=vegan&isAvailable=true&minPrice=100&maxPrice=500&page=2&limit=10
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from foodhub.database import get_db_session
from foodhub.dependencies import get_current_user_id
from foodhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, MAX_PAGE
from foodhub.schemas.common import ErrorResponse, MessageResponse
from foodhub.schemas.food import (
    FoodCreate,
    FoodCreatedResponse,
    FoodListResponse,
    FoodResponse,
    FoodUpdate,
    FoodUpdatedResponse,
)
from foodhub.services.food_service import food_service, parse_availability

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Food"],
    dependencies=[Depends(get_current_user_id)],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
)


@router.post(
    "/food",
    status_code=201,
    response_model=FoodCreatedResponse,
    responses={400: {"description": "Missing required fields", "model": ErrorResponse}},
    summary="Add a new food item",
)
async def create_food(
    payload: FoodCreate,
    db: AsyncSession = Depends(get_db_session),
) -> FoodCreatedResponse:
    food = await food_service.create_food(db, payload)
    return FoodCreatedResponse(saved_food_item=food)


@router.get(
    "/food",
    response_model=FoodListResponse,
    summary="List food items with filters and pagination",
)
async def list_food(
    category: Optional[str] = Query(default=None, description="Exact category, e.g. vegetarian"),
    is_available: Optional[str] = Query(
        default=None,
        alias="isAvailable",
        description="'true' for available items; any other value for unavailable",
    ),
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    page: int = Query(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    db: AsyncSession = Depends(get_db_session),
) -> FoodListResponse:
    return await food_service.list_food(
        db,
        category=category,
        is_available=parse_availability(is_available),
        min_price=min_price,
        max_price=max_price,
        page=page,
        limit=limit,
    )


@router.get(
    "/food/{food_id}",
    response_model=FoodResponse,
    responses={404: {"description": "Food item not found", "model": ErrorResponse}},
    summary="Get a food item by ID",
)
async def get_food(
    food_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> FoodResponse:
    return await food_service.get_food(db, food_id)


@router.put(
    "/food/{food_id}",
    response_model=FoodUpdatedResponse,
    responses={
        400: {"description": "No fields to update or invalid input", "model": ErrorResponse},
        404: {"description": "Food item not found", "model": ErrorResponse},
    },
    summary="Update a food item by ID",
)
async def update_food(
    food_id: UUID,
    payload: FoodUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> FoodUpdatedResponse:
    food = await food_service.update_food(db, food_id, payload)
    return FoodUpdatedResponse(updated_food_item=food)


@router.delete(
    "/food/{food_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Food item not found", "model": ErrorResponse}},
    summary="Delete a food item by ID",
)
async def delete_food(
    food_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await food_service.delete_food(db, food_id)
    return MessageResponse(message="Food item deleted successfully")
