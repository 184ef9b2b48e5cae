"""
FoodHub Backend — Password Hashing & Bearer Tokens
====================================================

What:  The two cryptographic primitives the API relies on:
       - bcrypt password hashing (passlib CryptContext)
       - HS256 JWT issue/verify (PyJWT)
Who:   UserService hashes on write, AuthService verifies and issues tokens,
       foodhub.dependencies.get_current_user_id decodes them per request.

Token payload:
    {
        "sub":    "<user uuid>",
        "userId": "<user uuid>",
        "iat":    <issued-at, seconds since epoch>,
        "exp":    <issued-at + JWT_EXPIRE_HOURS>
    }
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from foodhub.config import settings
from foodhub.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# ── Password Hashing ──────────────────────────────────────────────────────
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of `password`."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison of `password` against a stored hash."""
    return pwd_context.verify(password, password_hash)


# ── Bearer Tokens ─────────────────────────────────────────────────────────


def create_access_token(
    user_id: uuid.UUID,
    now: Optional[datetime] = None,
    secret_key: Optional[str] = None,
) -> str:
    """
    Issue a signed token for `user_id`, expiring JWT_EXPIRE_HOURS after `now`.

    `now` and `secret_key` exist for tests (expired tokens, foreign keys);
    application code relies on the defaults.
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "userId": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.jwt_expire_hours),
    }
    return jwt.encode(
        payload,
        secret_key or settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> uuid.UUID:
    """
    Verify a bearer token and return the user id it was issued for.

    Raises:
        AuthenticationError: expired, badly signed, or malformed token.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError(message="Token has expired")
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected bearer token: %s", type(e).__name__)
        raise AuthenticationError(
            message="Invalid token",
            context={"reason": type(e).__name__},
        )

    try:
        return uuid.UUID(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError(message="Invalid token", context={"reason": "bad_subject"})
