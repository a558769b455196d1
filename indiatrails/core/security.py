"""
Security: password hashing and JWT (best practices for APIs).
Challenge: Secure auth, no plain-text passwords, token validation.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from indiatrails.config import Settings, get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Claim names as written by .NET's JwtSecurityTokenHandler, kept so existing clients keep working
CLAIM_USER_ID = "nameid"
CLAIM_USERNAME = "unique_name"
CLAIM_EMAIL = "email"


def hash_password(password: str) -> str:
    """Salted adaptive hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)


def create_access_token(
    user_id: uuid.UUID,
    username: str,
    email: str,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """Signed HS256 token valid for jwt_expire_days. Subject is the user's email."""
    settings = settings or get_settings()
    issued = now or datetime.now(timezone.utc)
    expire = issued + timedelta(days=settings.jwt_expire_days)
    to_encode: dict[str, Any] = {
        CLAIM_USER_ID: str(user_id),
        CLAIM_USERNAME: username,
        CLAIM_EMAIL: email,
        "sub": email,
        "jti": str(uuid.uuid4()),
        "iat": int(issued.timestamp()),
        "nbf": int(issued.timestamp()),
        "exp": int(expire.timestamp()),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    return jwt.encode(to_encode, settings.jwt_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings | None = None) -> dict[str, Any] | None:
    """Validate signature, expiry, issuer and audience. Returns payload or None if invalid."""
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError:
        return None
