"""Cart value types passed between the cart repository and services."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CartLine:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class CartLineDetail:
    product_id: int
    quantity: int
    name: str
    price: float


@dataclass
class CartView:
    user_id: int
    items: list[CartLineDetail] = field(default_factory=list)
