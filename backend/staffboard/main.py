from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staffboard.api.v1.router import api_router
from staffboard.core.config import settings
from staffboard.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    if getattr(application.state, "employee_store", None) is None:
        try:
            application.state.employee_store = EmployeeStore.from_settings(settings)
        except Exception:
            logger.exception("Failed to initialize EmployeeStore — continuing without data")
            application.state.employee_store = None
    yield
    application.state.employee_store = None


app = FastAPI(
    title="Staffboard API",
    description="Employee management dashboard: records, analytics and login gate",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staffboard API"}
