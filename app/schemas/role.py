"""Pydantic schemas for user-role definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RoleCreate(BaseModel):
    code: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class RoleRead(BaseModel):
    id: int
    code: str
    name: str
    description: str
    is_system: bool

    model_config = {"from_attributes": True}
