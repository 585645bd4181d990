"""
User Routes

POST /users - Add a user, possibly an admin (admin only)
GET /users - List users (admin only)
GET /users/{username} - Get user with applied job ids (self or admin)
PATCH /users/{username} - Partial update (self or admin)
DELETE /users/{username} - Delete user (self or admin)
POST /users/{username}/jobs/{job_id} - Apply to a job (self or admin)
"""

from fastapi import APIRouter, Depends

from app.core.auth import create_token, ensure_admin, ensure_correct_user_or_admin
from app.models import user as user_model
from app.schemas.schemas import (
    UserCreate, UserUpdate, UserEnvelope, UserDetailEnvelope, UserTokenResponse,
    UserListResponse, AppliedResponse, DeletedResponse
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserTokenResponse, status_code=201)
async def create_user(data: UserCreate, admin: dict = Depends(ensure_admin)):
    """
    Add a new user. This is not the registration endpoint: only admins use it,
    and the new user may be an admin.
    """
    user = user_model.register(data.to_record())
    return {"user": user, "token": create_token(user)}


@router.get("", response_model=UserListResponse)
async def list_users(admin: dict = Depends(ensure_admin)):
    return {"users": user_model.find_all()}


@router.get("/{username}", response_model=UserDetailEnvelope)
async def get_user(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
    return {"user": user_model.get(username)}


@router.patch("/{username}", response_model=UserEnvelope)
async def update_user(username: str, data: UserUpdate, user: dict = Depends(ensure_correct_user_or_admin)):
    """Update firstName, lastName, password or email."""
    return {"user": user_model.update(username, data.to_changes())}


@router.delete("/{username}", response_model=DeletedResponse)
async def delete_user(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
    user_model.remove(username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}", response_model=AppliedResponse, status_code=201)
async def apply_to_job(username: str, job_id: int, user: dict = Depends(ensure_correct_user_or_admin)):
    """Apply to a job. Cannot apply twice to same job."""
    return {"applied": user_model.apply_to_job(username, job_id)}
