"""Pydantic schemas for cart, checkout and orders."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ── Cart ────────────────────────────────────────────────────────────
class AddCartItemRequest(BaseModel):
    product_id: int = Field(gt=0)
    quantity: int


class CartItemRead(BaseModel):
    product_id: int
    quantity: int
    name: str
    price: float

    model_config = {"from_attributes": True}


class CartRead(BaseModel):
    user_id: int
    items: list[CartItemRead]

    model_config = {"from_attributes": True}


class CartAddedResponse(BaseModel):
    status: str = "added"


# ── Checkout / orders ───────────────────────────────────────────────
class CheckoutRequest(BaseModel):
    payment_method: str


class OrderItemRead(BaseModel):
    product_id: int
    name: str = Field(validation_alias="product_name")
    price: float = Field(validation_alias="unit_price")
    quantity: int

    model_config = {"from_attributes": True}


class OrderRead(BaseModel):
    id: int
    user_id: int
    status: str
    payment_method: str
    total_amount: float
    created_at: datetime | None
    items: list[OrderItemRead]

    model_config = {"from_attributes": True}


class OrderStatusUpdate(BaseModel):
    status: str
