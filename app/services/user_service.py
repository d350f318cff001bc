"""
User directory — guarded creation and update of user accounts.

Role assignment is checked before anything else happens: a rejected
request performs no role lookup, computes no password hash and writes
nothing.  Callers pass the executor's role code as taken from the
authenticated request; ``None`` means an anonymous (guest) caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from app.domain.exceptions import CannotAssignRole, EmailAlreadyUsed, InvalidCredential
from app.domain.roles import ADMIN, RoleCode, can_assign_role, parse_role_code
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.services.role_service import RoleService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class PasswordHasher(Protocol):
    def hash(self, plain: str) -> str: ...


def _normalise_email(email: str) -> str:
    return email.strip().lower()


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidCredential(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )


class UserService:
    def __init__(
        self,
        users: UserRepository,
        roles: RoleService,
        hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._roles = roles
        self._hasher = hasher

    async def _authorise_role(
        self,
        executor_role: RoleCode | str | None,
        target_role: object,
    ) -> tuple[RoleCode, int]:
        """Validate *target_role* for *executor_role* and resolve its id."""
        target = parse_role_code(target_role)
        executor = parse_role_code(executor_role) if executor_role is not None else None

        # ADMIN may never hand out ADMIN, whatever the general policy says.
        if executor == ADMIN and target == ADMIN:
            logger.warning("Rejected: ADMIN attempted to assign ADMIN")
            raise CannotAssignRole("Admin cannot assign the ADMIN role")

        if not can_assign_role(executor, target):
            logger.warning("Rejected: %s attempted to assign %s", executor or "GUEST", target)
            raise CannotAssignRole()

        role_id = await self._roles.resolve(target)
        return target, role_id

    async def create_user(
        self,
        executor_role: RoleCode | str | None,
        name: str,
        email: str,
        password: str,
        target_role: RoleCode | str,
    ) -> User:
        _check_password(password)

        target, role_id = await self._authorise_role(executor_role, target_role)
        password_hash = await asyncio.to_thread(self._hasher.hash, password)

        user = User(
            name=name,
            email=_normalise_email(email),
            password_hash=password_hash,
            user_role_id=role_id,
        )
        created = await self._users.create(user)
        logger.info("Created user %s with role %s", created.email, target)
        return created

    async def update_user(
        self,
        executor_role: RoleCode | str | None,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        target_role: RoleCode | str | None = None,
    ) -> User:
        """Apply the supplied fields; ``None`` leaves a field unchanged."""
        user = await self._users.get_by_id(user_id)

        role_id: int | None = None
        if target_role is not None:
            _, role_id = await self._authorise_role(executor_role, target_role)

        password_hash: str | None = None
        if password is not None:
            _check_password(password)
            password_hash = await asyncio.to_thread(self._hasher.hash, password)

        new_email: str | None = None
        if email is not None:
            new_email = _normalise_email(email)
            if new_email != user.email and await self._users.email_taken(new_email, exclude_id=user.id):
                raise EmailAlreadyUsed()

        # Mutate only once every check has passed.
        if role_id is not None:
            user.user_role_id = role_id
        if name is not None:
            user.name = name
        if new_email is not None:
            user.email = new_email
        if password_hash is not None:
            user.password_hash = password_hash

        updated = await self._users.update(user)
        logger.info("Updated user %d", user_id)
        return updated

    async def delete_user(self, user_id: int) -> None:
        await self._users.delete(user_id)
        logger.info("Deleted user %d", user_id)

    async def get_user(self, user_id: int) -> User:
        return await self._users.get_by_id(user_id)

    async def list_users(self, role_code: RoleCode | str | None = None) -> list[User]:
        code = parse_role_code(role_code) if role_code is not None else None
        return await self._users.list(code)
