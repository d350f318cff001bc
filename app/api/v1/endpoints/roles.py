"""Admin CRUD for user-role definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.deps import get_role_service, require_admin
from app.models.user import User, UserRole
from app.schemas.role import RoleCreate, RoleRead, RoleUpdate
from app.services.role_service import RoleService

router = APIRouter(prefix="/admin/user-roles", tags=["roles"])


@router.get("", response_model=list[RoleRead])
async def list_roles(
    q: str | None = Query(default=None, max_length=100),
    _admin: User = Depends(require_admin),
    roles: RoleService = Depends(get_role_service),
) -> list[UserRole]:
    return await roles.list(q)


@router.post("", response_model=RoleRead, status_code=201)
async def create_role(
    body: RoleCreate,
    _admin: User = Depends(require_admin),
    roles: RoleService = Depends(get_role_service),
) -> UserRole:
    return await roles.create(body.code, body.name, body.description)


@router.get("/{role_id}", response_model=RoleRead)
async def get_role(
    role_id: int,
    _admin: User = Depends(require_admin),
    roles: RoleService = Depends(get_role_service),
) -> UserRole:
    return await roles.get(role_id)


@router.patch("/{role_id}", response_model=RoleRead)
async def update_role(
    role_id: int,
    body: RoleUpdate,
    _admin: User = Depends(require_admin),
    roles: RoleService = Depends(get_role_service),
) -> UserRole:
    return await roles.update(role_id, name=body.name, description=body.description)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(
    role_id: int,
    _admin: User = Depends(require_admin),
    roles: RoleService = Depends(get_role_service),
) -> Response:
    """System roles and roles still assigned to users cannot be deleted."""
    await roles.delete(role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
