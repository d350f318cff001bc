"""Credential check and token issuance."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.core.security import create_access_token, create_refresh_token, verify_password
from app.domain.exceptions import InvalidCredential, Unauthorized
from app.models.user import User
from app.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    access_token: str
    refresh_token: str


def issue_tokens(user: User) -> LoginResult:
    return LoginResult(
        user=user,
        access_token=create_access_token(user.id, role=user.role_code),
        refresh_token=create_refresh_token(user.id),
    )


class AuthService:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def login(self, email: str, password: str) -> LoginResult:
        email = (email or "").strip().lower()
        if not email or not password:
            raise InvalidCredential()

        user = await self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise Unauthorized()

        return issue_tokens(user)
