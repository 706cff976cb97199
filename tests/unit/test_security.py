"""
Unit tests for the security module.
Tests password hashing and session token creation/validation.
"""
import pytest
from datetime import timedelta
from jose import jwt

from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
    pwd_context as real_pwd_context,
)
from app.core.config import settings


@pytest.mark.unit
class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_hash_password(self):
        password = "secret123"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$")

    def test_verify_password_correct(self):
        hashed = hash_password("secret123")

        assert verify_password("secret123", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("secret123")

        assert verify_password("wrong", hashed) is False

    def test_real_bcrypt_uses_cost_factor_10(self):
        """Runs real bcrypt; the autouse mock only replaces the module attribute."""
        hashed = real_pwd_context.hash("secret123")

        assert hashed.startswith("$2b$10$")
        assert real_pwd_context.verify("secret123", hashed)
        assert not real_pwd_context.verify("wrong", hashed)


@pytest.mark.unit
class TestSessionTokens:
    """Test session token creation and decoding."""

    def test_token_payload_shape(self):
        token = create_access_token("64b7f0c2-0000-4000-8000-000000000001", "organizer")

        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=["HS256"])
        assert payload["user"] == {
            "id": "64b7f0c2-0000-4000-8000-000000000001",
            "role": "organizer",
        }
        assert "exp" in payload

    def test_token_expires_after_seven_days(self):
        from datetime import datetime, timezone

        token = create_access_token("user-1", "user")
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=["HS256"])

        remaining = payload["exp"] - datetime.now(timezone.utc).timestamp()
        assert timedelta(days=7) - timedelta(minutes=1) < timedelta(seconds=remaining) <= timedelta(days=7)

    def test_decode_valid_token(self):
        token = create_access_token("user-1", "admin")

        assert decode_token(token) == {"id": "user-1", "role": "admin"}

    def test_decode_invalid_token(self):
        with pytest.raises(ValueError, match="Invalid token"):
            decode_token("invalid.token.here")

    def test_decode_token_signed_with_other_secret(self):
        token = jwt.encode({"user": {"id": "user-1", "role": "user"}}, "another-secret", algorithm="HS256")

        with pytest.raises(ValueError, match="Invalid token"):
            decode_token(token)

    def test_decode_expired_token(self):
        token = create_access_token("user-1", "user", expires_delta=timedelta(seconds=-1))

        with pytest.raises(ValueError, match="Token has expired"):
            decode_token(token)

    def test_decode_token_missing_user_claim(self):
        token = jwt.encode({"sub": "user-1"}, settings.JWT_SECRET, algorithm="HS256")

        with pytest.raises(ValueError, match="Invalid token payload"):
            decode_token(token)
