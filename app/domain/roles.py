"""
Role codes and the role-assignment policy.

A role code is an open set: the three system codes plus whatever an
administrator defines, so ``RoleCode`` is a validated ``str`` rather than
an ``Enum``.  The policy special-cases the built-in codes by value.
"""

from __future__ import annotations

import re

from app.domain.exceptions import InvalidRoleCode

_ROLE_CODE_RE = re.compile(r"^[A-Z0-9_]{3,64}$")


class RoleCode(str):
    """Immutable, format-checked role code."""

    __slots__ = ()

    def __new__(cls, value: str) -> "RoleCode":
        if isinstance(value, RoleCode):
            return value
        if not isinstance(value, str) or not _ROLE_CODE_RE.fullmatch(value):
            raise InvalidRoleCode()
        return super().__new__(cls, value)

    @property
    def is_super_admin(self) -> bool:
        return self == SUPER_ADMIN

    @property
    def is_admin(self) -> bool:
        return self == ADMIN

    def __repr__(self) -> str:
        return f"RoleCode({str(self)!r})"


SUPER_ADMIN = RoleCode("SUPER_ADMIN")
ADMIN = RoleCode("ADMIN")
CUSTOMER = RoleCode("CUSTOMER")

SYSTEM_ROLES: tuple[RoleCode, ...] = (SUPER_ADMIN, ADMIN, CUSTOMER)


def parse_role_code(value: object) -> RoleCode:
    """Normalise untrusted input (trim + upper-case) into a ``RoleCode``.

    Raises ``InvalidRoleCode`` when the result does not match
    ``[A-Z0-9_]{3,64}``.
    """
    if not isinstance(value, str):
        raise InvalidRoleCode()
    return RoleCode(value.strip().upper())


def can_assign_role(executor: RoleCode | None, target: RoleCode) -> bool:
    """Return True if a caller holding *executor* may give *target* to a user.

    Only SUPER_ADMIN may hand out ADMIN.  Every other target is allowed,
    SUPER_ADMIN included.
    """
    if target == ADMIN:
        return executor == SUPER_ADMIN
    return True
