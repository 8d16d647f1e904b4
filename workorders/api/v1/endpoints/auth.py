"""Auth API: login and current user."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from workorders.api.v1.dependencies import get_current_user, get_user_repo
from workorders.application.dtos.user import UserResult
from workorders.core.config import get_settings
from workorders.core.limiter import limit_auth
from workorders.domain.exceptions import AuthenticationException
from workorders.infrastructure.persistence.repositories import UserRepository
from workorders.infrastructure.security.jwt import create_access_token
from workorders.schemas.auth import LoginRequest, TokenResponse
from workorders.schemas.user import UserResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Authenticate with email and password; return a bearer JWT.

    Unknown email and wrong password produce the same 401 message.
    """
    user = await user_repo.authenticate(email=body.email, password=body.password)
    if not user:
        raise AuthenticationException("Invalid credentials")
    token = create_access_token(user.id, role=user.role)
    return TokenResponse(
        access_token=token,
        expires_in=get_settings().access_token_expire_minutes * 60,
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserResult, Depends(get_current_user)],
):
    """Return the currently authenticated user. Requires Authorization: Bearer <token>."""
    return UserResponse.model_validate(asdict(current_user))
