"""
Order & OrderItem models.

Order items hold a copy of the product name and unit price taken at
checkout; ``product_id`` is informational only and carries no foreign key,
so later catalog edits or deletions never touch order history.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (Column, DateTime, ForeignKey, Index, Integer, Numeric,
                        String)
from sqlalchemy.orm import relationship

from app.db.base import Base


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (Index("ix_orders_user_id", "user_id"),)

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    user_id: int = Column(Integer, nullable=False)  # type: ignore[assignment]
    status: str = Column(String(20), nullable=False)  # type: ignore[assignment]
    # PENDING | PAID | SHIPPED | CANCELED
    payment_method: str = Column(String(50), nullable=False)  # type: ignore[assignment]
    total_amount: float = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="selectin",
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    order_id: int = Column(  # type: ignore[assignment]
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: int = Column(Integer, nullable=False, index=True)  # type: ignore[assignment]
    product_name: str = Column(String(255), nullable=False)  # type: ignore[assignment]
    unit_price: float = Column(Numeric(10, 2, asdecimal=False), nullable=False)  # type: ignore[assignment]
    quantity: int = Column(Integer, nullable=False)  # type: ignore[assignment]

    order = relationship("Order", back_populates="items")
