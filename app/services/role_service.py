"""Administrator-defined role definitions."""

from __future__ import annotations

import logging

from app.domain.exceptions import RoleImmutable, RoleInUse
from app.domain.roles import RoleCode, parse_role_code
from app.models.user import UserRole
from app.repositories.role_repo import UserRoleRepository

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(self, roles: UserRoleRepository) -> None:
        self._roles = roles

    async def resolve(self, code: RoleCode | str) -> int:
        return await self._roles.get_id_by_code(parse_role_code(code))

    async def list(self, query: str | None = None) -> list[UserRole]:
        return await self._roles.list(query)

    async def get(self, role_id: int) -> UserRole:
        return await self._roles.get_by_id(role_id)

    async def create(self, code: str, name: str, description: str = "") -> UserRole:
        role_code = parse_role_code(code)
        role = UserRole(
            code=str(role_code),
            name=name.strip(),
            description=description.strip(),
            is_system=False,
        )
        created = await self._roles.create(role)
        logger.info("Created role %s", created.code)
        return created

    async def update(
        self,
        role_id: int,
        name: str | None = None,
        description: str | None = None,
    ) -> UserRole:
        """Rename or re-describe a role; the code itself never changes."""
        role = await self._roles.get_by_id(role_id)
        if name is not None:
            role.name = name.strip()
        if description is not None:
            role.description = description.strip()
        return await self._roles.update(role)

    async def delete(self, role_id: int) -> None:
        role = await self._roles.get_by_id(role_id)
        if role.is_system:
            raise RoleImmutable()
        if await self._roles.count_users(role.id) > 0:
            raise RoleInUse()
        await self._roles.delete(role)
        logger.info("Deleted role %s", role.code)
