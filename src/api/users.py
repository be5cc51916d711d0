"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_identity, get_user_service
from src.schemas.user import UserResponse, UserUpdate
from src.services.session import Identity
from src.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    identity: Annotated[Identity, Depends(get_identity)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return user_service.get_self(identity)


@router.patch("", response_model=UserResponse)
async def edit_me(
    user_data: UserUpdate,
    identity: Annotated[Identity, Depends(get_identity)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's profile."""
    return user_service.edit_self(identity, user_data.model_dump(exclude_unset=True))
