"""Role definitions and role-code resolution."""

from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import RoleCodeExists, RoleNotFound
from app.models.user import User, UserRole


class UserRoleRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, role_id: int) -> UserRole:
        result = await self.db.execute(select(UserRole).where(UserRole.id == role_id))
        role = result.scalar_one_or_none()
        if role is None:
            raise RoleNotFound()
        return role

    async def get_by_code(self, code: str) -> UserRole:
        result = await self.db.execute(select(UserRole).where(UserRole.code == str(code)))
        role = result.scalar_one_or_none()
        if role is None:
            raise RoleNotFound()
        return role

    async def get_id_by_code(self, code: str) -> int:
        result = await self.db.execute(select(UserRole.id).where(UserRole.code == str(code)))
        role_id = result.scalar_one_or_none()
        if role_id is None:
            raise RoleNotFound(f"Role not found: {code}")
        return role_id

    async def list(self, query: str | None = None) -> list[UserRole]:
        stmt = select(UserRole).order_by(UserRole.id.desc())
        if query:
            safe = query.replace("%", r"\%").replace("_", r"\_")
            pattern = f"%{safe}%"
            stmt = stmt.where(
                or_(
                    UserRole.name.ilike(pattern, escape="\\"),
                    UserRole.code.ilike(pattern, escape="\\"),
                )
            )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, role: UserRole) -> UserRole:
        self.db.add(role)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise RoleCodeExists()
        await self.db.refresh(role)
        return role

    async def update(self, role: UserRole) -> UserRole:
        await self.db.commit()
        await self.db.refresh(role)
        return role

    async def delete(self, role: UserRole) -> None:
        await self.db.delete(role)
        await self.db.commit()

    async def count_users(self, role_id: int) -> int:
        result = await self.db.execute(
            select(func.count(User.id)).where(User.user_role_id == role_id)
        )
        return int(result.scalar_one())
