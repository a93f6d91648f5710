"""Tests for password hashing and access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from jose import ExpiredSignatureError, JWTError, jwt

from src.portfolio.core.config import get_settings
from src.portfolio.core.security import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

pytestmark = pytest.mark.unit


class TestPasswordHashing:
    def test_hash_and_verify(self) -> None:
        hashed = hash_password("correct-horse-battery-staple")
        assert hashed.startswith("$argon2id$")
        assert verify_password("correct-horse-battery-staple", hashed)

    def test_wrong_password(self) -> None:
        hashed = hash_password("correct-horse-battery-staple")
        assert not verify_password("wrong-password", hashed)

    def test_invalid_hash_returns_false(self) -> None:
        assert not verify_password("anything", "not-a-hash")

    def test_dummy_hash_rejects_guesses(self) -> None:
        assert not verify_password("password", DUMMY_PASSWORD_HASH)

    def test_hashes_are_salted(self) -> None:
        assert hash_password("same") != hash_password("same")


class TestAccessTokens:
    def test_round_trip_claims(self) -> None:
        admin_id = uuid4()
        token = create_access_token(admin_id, "admin@example.com")

        payload = decode_token(token)

        assert payload["sub"] == str(admin_id)
        assert payload["email"] == "admin@example.com"
        assert payload["type"] == TokenType.ACCESS
        assert "exp" in payload

    def test_default_expiry_from_settings(self) -> None:
        settings = get_settings()
        token = create_access_token(uuid4(), "admin@example.com")
        payload = jwt.get_unverified_claims(token)
        lifetime = settings.access_token_expire_minutes * 60

        remaining = payload["exp"] - datetime.now(UTC).timestamp()
        assert lifetime - 5 <= remaining <= lifetime + 5

    def test_expired_token(self) -> None:
        token = create_access_token(uuid4(), "admin@example.com", timedelta(seconds=-1))
        with pytest.raises(ExpiredSignatureError):
            decode_token(token)

    def test_wrong_signature(self) -> None:
        token = jwt.encode(
            {"sub": str(uuid4()), "type": TokenType.ACCESS},
            "another-secret-key-that-is-long-enough",
            algorithm="HS256",
        )
        with pytest.raises(JWTError):
            decode_token(token)

    def test_garbage_token(self) -> None:
        with pytest.raises(JWTError):
            decode_token("not.a.jwt")
