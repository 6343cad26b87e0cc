from __future__ import annotations

from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field

from lsm.interfaces.http.schemas.base import CamelModel


class SignupRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    phone_number: str | None = Field(default=None, max_length=50)


class SigninRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone_number: str | None = None


class AuthResponse(CamelModel):
    token: str
    user: UserResponse
