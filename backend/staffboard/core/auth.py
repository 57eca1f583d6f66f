"""Login gate — demo credential check plus signed bearer tokens."""

from __future__ import annotations

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import HTTPException, status
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from staffboard.core.config import Settings
from staffboard.models.auth import UserInfo

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    pass


# email -> (password, display name, role)
DEMO_USERS: dict[str, tuple[str, str, str]] = {
    "admin@empresa.com": ("admin123", "Administrador", "admin"),
    "lider@empresa.com": ("lider123", "Líder de Equipo", "leader"),
}


def authenticate(email: str, password: str) -> UserInfo:
    entry = DEMO_USERS.get(email.strip().lower())
    if entry is None or not hmac.compare_digest(entry[0].encode("utf-8"), password.encode("utf-8")):
        logger.info("Rejected login for %s", email)
        raise AuthenticationError("Invalid email or password")

    _, name, role = entry
    return UserInfo(id=email.strip().lower(), name=name, email=email.strip().lower(), role=role)


def create_access_token(user: UserInfo, settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.AUTH_TOKEN_TTL_MINUTES)).timestamp()),
    }
    return jwt.encode(claims, settings.AUTH_SECRET_KEY, algorithm=settings.AUTH_ALGORITHM)


def validate_token(token: str, settings: Settings) -> dict[str, Any]:
    if not settings.AUTH_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Missing authentication configuration",
        )

    try:
        return jwt.decode(
            token,
            settings.AUTH_SECRET_KEY,
            algorithms=[settings.AUTH_ALGORITHM],
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is expired",
        ) from e
    except (JWTClaimsError, JWTError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
        ) from e


def user_from_payload(payload: dict[str, Any]) -> UserInfo:
    return UserInfo(
        id=payload.get("sub"),
        name=payload.get("name"),
        email=payload.get("email"),
        role=payload.get("role"),
    )
