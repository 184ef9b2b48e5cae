"""
FoodHub Backend — Auth Service
================================

What:  Email/password login that issues a bearer token.
Who:   Called by POST /api/login.

Unknown email and wrong password raise the same InvalidCredentialsError,
so the response body never reveals which one was wrong.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from foodhub.exceptions import InvalidCredentialsError
from foodhub.models.user import User
from foodhub.schemas.user import LoginResponse, UserSummary
from foodhub.security import create_access_token, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    async def login(self, db: AsyncSession, email: str, password: str) -> LoginResponse:
        """
        Authenticate by email and password.

        Returns:
            LoginResponse with a token valid for JWT_EXPIRE_HOURS and a
            summary of the user's profile.

        Raises:
            InvalidCredentialsError: unknown email or password mismatch
        """
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError()

        matches = await run_in_threadpool(verify_password, password, user.password_hash)
        if not matches:
            logger.info("Login rejected: bad password for user %s", user.id)
            raise InvalidCredentialsError()

        token = create_access_token(user.id)
        logger.info("User %s logged in", user.id)

        return LoginResponse(
            token=token,
            user=UserSummary(
                user_name=user.username,
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
            ),
        )


auth_service = AuthService()
