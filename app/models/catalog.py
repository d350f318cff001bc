"""
Category & Product models — the catalog the cart and checkout read from.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (Boolean, Column, DateTime, ForeignKey, Integer,
                        Numeric, String, Text)

from app.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    slug: str = Column(String(64), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    description: str = Column(Text, nullable=False, default="")  # type: ignore[assignment]
    is_active: bool = Column(Boolean, default=True, server_default="true")  # type: ignore[assignment]


class Product(Base):
    __tablename__ = "products"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(255), nullable=False)  # type: ignore[assignment]
    description: str = Column(Text, nullable=False, default="")  # type: ignore[assignment]
    price: float = Column(Numeric(10, 2, asdecimal=False), nullable=False)  # type: ignore[assignment]
    stock: int = Column(Integer, nullable=False, default=0)  # type: ignore[assignment]
    category_id: int | None = Column(  # type: ignore[assignment]
        Integer, ForeignKey("categories.id"), nullable=True, index=True
    )
    is_active: bool = Column(Boolean, default=True, server_default="true")  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
