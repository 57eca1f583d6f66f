from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from staffboard.core.auth import AuthenticationError, authenticate, create_access_token
from staffboard.core.config import settings
from staffboard.core.dependencies import get_current_user
from staffboard.models.auth import LoginRequest, TokenResponse, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest):
    try:
        user = authenticate(body.email, body.password)
    except AuthenticationError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(err),
        ) from err

    logger.info("User %s logged in", user.email)
    return TokenResponse(
        access_token=create_access_token(user, settings),
        expires_in=settings.AUTH_TOKEN_TTL_MINUTES * 60,
        user=user,
    )


@router.get("/me", response_model=UserInfo)
async def me(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return user
