"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes (admin, self-or-admin)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.errors import UnauthorizedError

settings = get_settings()

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_work_factor,
)

# Bearer token extractor; a missing header is not an error until a route requires login
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_token(user: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT for a user record ({username, isAdmin, ...})."""
    payload = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
        "exp": datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[dict]:
    """
    FastAPI dependency - payload of a valid token, or None.

    An invalid or missing token is not an error here.
    """
    if credentials is None:
        return None
    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("username"):
        return None
    return payload


async def ensure_admin(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Dependency - require an admin token."""
    if user is None or not user.get("isAdmin"):
        raise UnauthorizedError()
    return user


async def ensure_correct_user_or_admin(username: str, user: Optional[dict] = Depends(get_current_user)) -> dict:
    """
    Dependency - require the token's user to match the {username} path
    parameter, or be an admin.

    Usage:
        @router.get("/{username}")
        async def route(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
            ...
    """
    if user is None:
        raise UnauthorizedError()
    if not (user.get("isAdmin") or user.get("username") == username):
        raise UnauthorizedError()
    return user
