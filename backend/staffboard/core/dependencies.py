from __future__ import annotations

import logging

from fastapi import Header, HTTPException, Request, status

from staffboard.core.auth import user_from_payload, validate_token
from staffboard.core.config import settings
from staffboard.models.auth import UserInfo
from staffboard.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


async def get_current_user(authorization: str | None = Header(None)) -> UserInfo:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization.split(" ", 1)[1]

    try:
        payload = validate_token(token, settings)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Token validation error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return user_from_payload(payload)


def get_employee_store(request: Request) -> EmployeeStore:
    store: EmployeeStore | None = getattr(request.app.state, "employee_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee store not initialized",
        )
    return store
