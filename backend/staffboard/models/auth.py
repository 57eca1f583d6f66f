"""Authentication models for the login gate."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, pattern=r"^\S+@\S+\.\S+$")
    password: str = Field(..., min_length=6)


class UserInfo(BaseModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserInfo
