# File: authapi/core/security.py

"""
Security helpers for the auth API.

Two concerns live here:
  - Password hashing with bcrypt (salted, tunable cost via BCRYPT_ROUNDS)
  - Signed, time-bounded access tokens (JWT, HS256 by default)

Tokens are stateless: nothing about an issued token is stored, so its
validity depends only on the signature and the ``exp`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from jose import jwt

from authapi.core.config import settings


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with bcrypt using a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of ``password`` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign ``data`` as a JWT with ``iat`` and ``exp`` claims added.

    jose raises ``JWTError`` if signing fails; callers let it propagate.
    """
    to_encode: dict[str, Any] = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the token claims.

    Raises ``jose.JWTError`` (``ExpiredSignatureError`` for stale tokens).
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
