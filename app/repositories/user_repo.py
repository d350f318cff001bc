"""User repository — persistence for user records (role joined in)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import EmailAlreadyUsed, UserNotFound
from app.models.user import User, UserRole


class UserRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: int) -> User:
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        user = result.unique().scalar_one_or_none()
        if user is None:
            raise UserNotFound()
        return user

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.unique().scalar_one_or_none()

    async def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        stmt = select(User.id).where(User.email == email)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list(self, role_code: str | None = None) -> list[User]:
        stmt = select(User).order_by(User.id)
        if role_code is not None:
            stmt = stmt.join(UserRole, User.user_role_id == UserRole.id).where(
                UserRole.code == str(role_code)
            )
        result = await self.db.execute(stmt)
        return list(result.unique().scalars().all())

    async def create(self, user: User) -> User:
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise EmailAlreadyUsed() from exc
        return await self.get_by_id(user.id)

    async def update(self, user: User) -> User:
        user_id = user.id
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise EmailAlreadyUsed() from exc
        return await self.get_by_id(user_id)

    async def delete(self, user_id: int) -> None:
        user = await self.get_by_id(user_id)
        await self.db.delete(user)
        await self.db.commit()
