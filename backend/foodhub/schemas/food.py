"""
FoodHub Backend — Food Schemas
================================

What:  Contracts for the food catalog endpoints.

FoodCreate types every required field as Optional: the
"Please provide all required fields" rule (missing OR falsy) is applied by
FoodService so that it can answer with one consistent message.
"""

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from foodhub.schemas.common import CamelModel, Pagination

FoodCategory = Literal["vegetarian", "non-vegetarian", "vegan", "dessert"]


class FoodCreate(CamelModel):
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = Field(default=None, max_length=500)
    category: Optional[FoodCategory] = None
    ingredients: Optional[List[str]] = None
    is_available: Optional[bool] = None
    rating: Optional[float] = Field(default=None, ge=1, le=5)
    servings: Optional[int] = None


class FoodUpdate(CamelModel):
    """Partial update; an empty body is rejected with "No fields to update"."""
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = Field(default=None, max_length=500)
    category: Optional[FoodCategory] = None
    ingredients: Optional[List[str]] = None
    is_available: Optional[bool] = None
    rating: Optional[float] = Field(default=None, ge=1, le=5)
    servings: Optional[int] = None


class FoodResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    price: float
    image: str
    category: str
    ingredients: List[str]
    is_available: bool
    rating: float
    servings: int
    created_at: datetime
    updated_at: datetime


class FoodCreatedResponse(CamelModel):
    message: str = "Food item added successfully"
    saved_food_item: FoodResponse


class FoodUpdatedResponse(CamelModel):
    message: str = "Food item updated successfully"
    updated_food_item: FoodResponse


class FoodListResponse(CamelModel):
    message: str = "Food items fetched successfully"
    food_items: List[FoodResponse]
    pagination: Pagination
