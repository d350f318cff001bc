"""Pydantic schemas for categories and products."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ── Category ────────────────────────────────────────────────────────
class CategoryCreate(BaseModel):
    name: str = Field(max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description: str = ""
    is_active: bool = True


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description: str | None = None
    is_active: bool | None = None


class CategoryRead(BaseModel):
    id: int
    name: str
    slug: str
    description: str
    is_active: bool

    model_config = {"from_attributes": True}


# ── Product ─────────────────────────────────────────────────────────
class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    price: float = Field(gt=0)
    stock: int = Field(default=0, ge=0)
    category_id: int | None = None
    is_active: bool = True


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, gt=0)
    stock: int | None = Field(default=None, ge=0)
    category_id: int | None = None
    is_active: bool | None = None


class ProductRead(BaseModel):
    id: int
    name: str
    description: str
    price: float
    stock: int
    category_id: int | None
    is_active: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
