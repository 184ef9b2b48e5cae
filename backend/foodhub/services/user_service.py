"""
FoodHub Backend — User Service (Credential Store)
===================================================

What:  Registration, lookup, partial profile update, and deletion of users.
Who:   Called by the /api/users route handlers.

Uniqueness:
    Username and email are UNIQUE in the schema. Before writing, the service
    looks for an existing row so it can name the conflicting field; a
    concurrent insert that slips past that check still fails on flush with
    an IntegrityError, which is translated into the same DuplicateKeyError.

Partial updates:
    Only fields actually present in the request body are applied
    (model_dump(exclude_unset=True)); explicit nulls are ignored.
    A supplied password is re-hashed before it is stored.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from foodhub.exceptions import DatabaseError, DuplicateKeyError, NotFoundError
from foodhub.models.user import User
from foodhub.schemas.user import UserCreate, UserResponse, UserUpdate
from foodhub.security import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic layer for user accounts.

    Error Handling Strategy:
        Missing rows → NotFoundError (404)
        Unique violations → DuplicateKeyError (400)
        Any other SQLAlchemy failure → DatabaseError (500, details logged only)
    """

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        """
        Register a new user with a bcrypt-hashed password.

        Raises:
            DuplicateKeyError: username or email already registered
        """
        await self._ensure_unique(db, username=payload.username, email=payload.email)

        # bcrypt blocks; run it in the threadpool
        password_hash = await run_in_threadpool(hash_password, payload.password)

        user = User(
            username=payload.username,
            email=payload.email,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        db.add(user)
        await self._flush(db, action="create user")

        logger.info("User registered: %s (%s)", user.id, user.username)
        return UserResponse.model_validate(user)

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        try:
            result = await db.execute(select(User).order_by(User.created_at, User.id))
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e))
            raise DatabaseError(
                message="Failed to fetch users",
                context={"error_type": type(e).__name__},
            )
        return [UserResponse.model_validate(user) for user in users]

    async def get_user(self, db: AsyncSession, user_id: uuid.UUID) -> UserResponse:
        user = await self._get_or_404(db, user_id)
        return UserResponse.model_validate(user)

    async def update_user(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        payload: UserUpdate,
    ) -> UserResponse:
        """
        Apply the fields present in `payload` to an existing user.

        Raises:
            NotFoundError: no user with `user_id`
            DuplicateKeyError: new username/email belongs to another user
        """
        user = await self._get_or_404(db, user_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "username" in changes or "email" in changes:
            await self._ensure_unique(
                db,
                username=changes.get("username"),
                email=changes.get("email"),
                exclude_id=user.id,
            )

        password = changes.pop("password", None)
        if password:
            user.password_hash = await run_in_threadpool(hash_password, password)

        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_at = datetime.now(timezone.utc)

        await self._flush(db, action="update user")
        logger.info("User %s updated", user.id)
        return UserResponse.model_validate(user)

    async def delete_user(self, db: AsyncSession, user_id: uuid.UUID) -> None:
        user = await self._get_or_404(db, user_id)
        await db.delete(user)
        await self._flush(db, action="delete user")
        logger.info("User %s deleted", user_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_404(self, db: AsyncSession, user_id: uuid.UUID) -> User:
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id))
        return user

    async def _ensure_unique(
        self,
        db: AsyncSession,
        username: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[uuid.UUID] = None,
    ) -> None:
        """Fast-path duplicate check; the UNIQUE constraints remain authoritative."""
        clauses = []
        if username:
            clauses.append(User.username == username)
        if email:
            clauses.append(User.email == email)
        if not clauses:
            return

        query = select(User).where(or_(*clauses))
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)

        result = await db.execute(query)
        existing = result.scalars().first()
        if existing is None:
            return

        if username and existing.username == username:
            raise DuplicateKeyError(
                message="Username already exists",
                field="username",
            )
        raise DuplicateKeyError(message="Email already exists", field="email")

    async def _flush(self, db: AsyncSession, action: str) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            logger.warning("Unique constraint violation during %s: %s", action, e.orig)
            raise DuplicateKeyError(
                message="Username or email already exists",
                context={"action": action},
            )
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", action, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to {action}",
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
