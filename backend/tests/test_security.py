"""
FoodHub Backend — Password Hashing & Token Tests
==================================================
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from foodhub.config import settings
from foodhub.exceptions import AuthenticationError
from foodhub.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_verify_roundtrip(self):
        hashed = hash_password("secret1")
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_same_password_gets_distinct_salts(self):
        assert hash_password("secret1") != hash_password("secret1")


class TestAccessTokens:
    def test_token_carries_user_id(self):
        user_id = uuid.uuid4()
        token = create_access_token(user_id)

        assert decode_access_token(token) == user_id

        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=["HS256"])
        assert payload["userId"] == str(user_id)
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_expired_token_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=settings.jwt_expire_hours, minutes=1)
        token = create_access_token(uuid.uuid4(), now=issued)

        with pytest.raises(AuthenticationError, match="expired"):
            decode_access_token(token)

    def test_token_signed_with_other_secret_rejected(self):
        token = create_access_token(uuid.uuid4(), secret_key="another-secret-key-of-adequate-length!!")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token)

    def test_garbage_token_rejected(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token("not-a-jwt")

    def test_token_without_subject_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"exp": exp}, settings.jwt_secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token)

    def test_token_with_non_uuid_subject_rejected(self):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"sub": "42", "exp": exp}, settings.jwt_secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token)
