"""User & authentication schemas."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from quizapp.schemas.common import CamelModel


class Role(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class UserCreate(CamelModel):
    """POST /api/auth/signup"""

    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    role: Role
    admin_key: str | None = None

    @field_validator("role", mode="before")
    @classmethod
    def normalize_legacy_role(cls, value):
        # older clients sign students up as "user"
        return Role.STUDENT.value if value == "user" else value

    @model_validator(mode="after")
    def require_admin_key(self):
        if self.role == Role.ADMIN and not self.admin_key:
            raise ValueError("adminKey is required for admin accounts")
        return self


class UserLogin(CamelModel):
    """POST /api/auth/login"""

    email: EmailStr
    password: str
    admin_key: str | None = None


class UserRead(CamelModel):
    """User returned from API: never exposes password or admin key."""

    id: uuid.UUID
    name: str
    email: str
    role: Role
    created_at: datetime


class AuthResponse(BaseModel):
    """Combined auth response: token + user profile."""

    access_token: str
    token_type: str = "bearer"
    user: UserRead
