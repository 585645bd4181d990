"""
Authentication Routes

POST /auth/token - Login and get JWT token
POST /auth/register - Register new (non-admin) user and get JWT token
"""

from fastapi import APIRouter

from app.core.auth import create_token
from app.models import user as user_model
from app.schemas.schemas import LoginRequest, RegisterRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/token", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = user_model.authenticate(request.username, request.password)
    return TokenResponse(token=create_token(user))


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(request: RegisterRequest):
    """Register a new user account. Self-registered users are never admins."""
    user = user_model.register({**request.to_record(), "isAdmin": False})
    return TokenResponse(token=create_token(user))
