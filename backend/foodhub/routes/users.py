"""
FoodHub Backend — User & Login Route Handlers
===============================================

What:  /api/users CRUD and POST /api/login.
Auth:  Registration and login are public; every other user route requires
       a bearer token (get_current_user_id).
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from foodhub.database import get_db_session
from foodhub.dependencies import get_current_user_id
from foodhub.schemas.common import ErrorResponse, MessageResponse
from foodhub.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserEnvelope,
    UserResponse,
    UserUpdate,
)
from foodhub.services.auth_service import auth_service
from foodhub.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])

_AUTH_RESPONSES = {401: {"description": "Missing or invalid token", "model": ErrorResponse}}


@router.post(
    "/users",
    status_code=201,
    response_model=UserEnvelope,
    responses={400: {"description": "Validation error or duplicate user", "model": ErrorResponse}},
    summary="Register a new user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserEnvelope:
    user = await user_service.create_user(db, payload)
    return UserEnvelope(message="User created successfully", user=user)


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses=_AUTH_RESPONSES,
    summary="List all users",
)
async def list_users(
    _: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    return await user_service.list_users(db)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={**_AUTH_RESPONSES, 404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a user by ID",
)
async def get_user(
    user_id: UUID,
    _: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.put(
    "/users/{user_id}",
    response_model=UserEnvelope,
    responses={**_AUTH_RESPONSES, 404: {"description": "User not found", "model": ErrorResponse}},
    summary="Update a user's details",
    description="Only fields present in the body are changed. A new password is re-hashed.",
)
async def update_user(
    user_id: UUID,
    payload: UserUpdate,
    _: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> UserEnvelope:
    user = await user_service.update_user(db, user_id, payload)
    return UserEnvelope(message="User updated successfully", user=user)


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses={**_AUTH_RESPONSES, 404: {"description": "User not found", "model": ErrorResponse}},
    summary="Delete a user by ID",
)
async def delete_user(
    user_id: UUID,
    _: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await user_service.delete_user(db, user_id)
    return MessageResponse(message="User deleted successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Log in and receive a bearer token",
    description="The token embeds the user id and expires 24 hours after issue.",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await auth_service.login(db, payload.email, payload.password)
