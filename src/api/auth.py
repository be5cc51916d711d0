"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import AuthCredentials, Token
from src.schemas.errors import ErrorResponse
from src.schemas.user import UserResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def signup(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth_service.signup(credentials.email, credentials.password)


@router.post(
    "/signin",
    response_model=Token,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    },
)
async def signin(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    access_token = auth_service.signin(credentials.email, credentials.password)
    return Token(access_token=access_token)
