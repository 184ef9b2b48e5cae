"""
FoodHub Backend — User & Auth Schemas
=======================================

What:  Contracts for registration, profile updates, user responses, and login.

Validation rules:
    username: 3-30 characters
    email:    must match EMAIL_PATTERN
    password: at least 6 characters before hashing

Responses never carry the password hash.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from foodhub.schemas.common import CamelModel

EMAIL_PATTERN = r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z0-9]{2,4}$"


class UserCreate(CamelModel):
    username: str = Field(min_length=3, max_length=30)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=6, max_length=128)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


class UserUpdate(CamelModel):
    """
    Partial profile update.

    Only fields present in the request body are applied (see
    UserService.update_user). A supplied password is re-hashed.
    """
    username: Optional[str] = Field(default=None, min_length=3, max_length=30)
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN, max_length=255)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_pic: Optional[str] = Field(default=None, max_length=500)


class UserResponse(CamelModel):
    id: uuid.UUID
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic: Optional[str] = None
    created_at: datetime


class UserEnvelope(CamelModel):
    """Wraps a user with a human-readable message (create/update)."""
    message: str
    user: UserResponse


UserList = List[UserResponse]


# ── Login ────────────────────────────────────────────────────────────────


class LoginRequest(CamelModel):
    email: str
    password: str


class UserSummary(CamelModel):
    user_name: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginResponse(CamelModel):
    message: str = "Login Successfully"
    token: str
    user: UserSummary
