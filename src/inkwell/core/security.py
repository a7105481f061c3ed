"""Password hashing and bearer token helpers."""
from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from inkwell.core.settings import Settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted hash string suitable for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, settings: Settings) -> str:
    """Issue a signed JWT for ``subject``.

    Each token carries a random ``jti`` so individual sessions can be revoked.
    """
    issued_at = datetime.now(UTC)
    expires = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": subject,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires.timestamp()),
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict[str, object]:
    """Decode and verify a JWT, returning its claims.

    Raises:
        JWTError: If the signature, expiry or structure is invalid.
    """
    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    if not claims.get("sub"):
        raise JWTError("Token has no subject")
    return claims


def new_verification_token() -> str:
    return secrets.token_urlsafe(24)
