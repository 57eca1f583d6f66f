from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from staffboard.core.config import settings
from staffboard.core.dependencies import get_current_user
from staffboard.models.auth import UserInfo

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(request: Request):
    store = getattr(request.app.state, "employee_store", None)
    services: dict[str, str] = {
        "employee_store": "ok" if store is not None else "not_initialized",
        "storage": settings.STORAGE_BACKEND,
    }

    return {
        "status": "healthy" if store is not None else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/protected")
async def health_protected(user: UserInfo = Depends(get_current_user)):
    return {"status": "ok", "user": user.model_dump()}


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
