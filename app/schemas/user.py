"""Pydantic schemas for User CRUD and self-registration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

def _check_email(v: str) -> str:
    v = v.strip().lower()
    local, _, domain = v.partition("@")
    if not local or "." not in domain:
        raise ValueError("Invalid email address")
    return v


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name must not be empty")
    return v


class RegisterRequest(BaseModel):
    name: str = Field(max_length=200)
    email: str = Field(max_length=320)
    password: str = Field(max_length=72)

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        return _check_name(v)


class UserCreate(RegisterRequest):
    role_code: str


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=72)
    role_code: str | None = None

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str | None) -> str | None:
        return _check_email(v) if v is not None else v

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str | None) -> str | None:
        return _check_name(v) if v is not None else v


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role_code: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
