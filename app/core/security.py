"""
Password hashing and session token helpers.

Tokens carry a ``user`` claim of the form ``{"id": ..., "role": ...}`` and
are signed with the configured ``JWT_SECRET``.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
from jose import jwt, JWTError
from passlib.context import CryptContext
from app.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a password against a hash."""
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed session token for a user.

    Args:
        user_id: Id of the authenticated user
        role: Role string stored on the user
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {"user": {"id": str(user_id), "role": role}, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Dict:
    """
    Decode and validate a session token.

    Args:
        token: JWT token to decode

    Returns:
        The ``user`` claim, ``{"id": ..., "role": ...}``

    Raises:
        ValueError: If token is invalid, expired or lacks the user claim
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise ValueError("Token has expired")
    except JWTError as e:
        raise ValueError(f"Invalid token: {str(e)}")

    user = payload.get("user")
    if not isinstance(user, dict) or "id" not in user:
        raise ValueError("Invalid token payload: missing 'user' claim")
    return user
