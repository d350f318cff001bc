"""
First-run data: the three system roles and the initial super admin.

Both functions are idempotent and safe to call on every startup.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.security import get_password_hash
from app.domain.roles import ADMIN, CUSTOMER, SUPER_ADMIN
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)

SYSTEM_ROLE_NAMES = {
    SUPER_ADMIN: "Super Administrator",
    ADMIN: "Administrator",
    CUSTOMER: "Customer",
}


async def seed_system_roles(session: AsyncSession) -> None:
    result = await session.execute(select(UserRole.code))
    existing = set(result.scalars().all())

    missing = [code for code in SYSTEM_ROLE_NAMES if code not in existing]
    for code in missing:
        session.add(UserRole(code=code, name=SYSTEM_ROLE_NAMES[code], is_system=True))
    if missing:
        await session.commit()
        logger.info("Seeded system roles: %s", ", ".join(missing))


async def seed_super_admin(session: AsyncSession) -> None:
    """Create the configured super admin if no account uses that email yet."""
    email = settings.FIRST_SUPER_ADMIN_EMAIL.strip().lower()
    result = await session.execute(select(User.id).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        return

    role_id = (
        await session.execute(select(UserRole.id).where(UserRole.code == SUPER_ADMIN))
    ).scalar_one()
    session.add(
        User(
            name=settings.FIRST_SUPER_ADMIN_NAME,
            email=email,
            password_hash=get_password_hash(settings.FIRST_SUPER_ADMIN_PASSWORD),
            user_role_id=role_id,
        )
    )
    await session.commit()
    logger.info("Default super admin created: %s (password: <redacted>)", email)
