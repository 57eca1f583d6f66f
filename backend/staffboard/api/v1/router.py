from fastapi import APIRouter

from staffboard.api.v1.endpoints import analytics, auth, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(employees.router)
api_router.include_router(analytics.router)
