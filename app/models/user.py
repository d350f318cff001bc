"""
User & UserRole models — authentication & role-based access control.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.domain.roles import RoleCode


class UserRole(Base):
    __tablename__ = "user_roles"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    code: str = Column(String(64), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    name: str = Column(String(100), nullable=False)  # type: ignore[assignment]
    description: str = Column(String(500), nullable=False, default="", server_default="")  # type: ignore[assignment]
    is_system: bool = Column(Boolean, nullable=False, default=False, server_default="false")  # type: ignore[assignment]


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    email: str = Column(String(320), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    password_hash: str = Column(String(128), nullable=False)  # type: ignore[assignment]
    user_role_id: int = Column(  # type: ignore[assignment]
        Integer, ForeignKey("user_roles.id"), nullable=False, index=True
    )
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    role = relationship("UserRole", lazy="joined")

    @property
    def role_code(self) -> RoleCode:
        return RoleCode(self.role.code)
