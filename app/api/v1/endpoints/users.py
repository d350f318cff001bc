"""
Admin user management.

Every route requires ADMIN or SUPER_ADMIN. Which roles the caller may
hand out is decided by the user service, not here.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.deps import get_user_service, require_admin
from app.models.user import User
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/admin/users", tags=["users"])


@router.get("", response_model=list[UserRead])
async def list_users(
    role: str | None = Query(default=None, description="Filter by role code"),
    _admin: User = Depends(require_admin),
    users: UserService = Depends(get_user_service),
) -> list[User]:
    return await users.list_users(role)


@router.post("", response_model=UserRead, status_code=201)
async def create_user(
    body: UserCreate,
    current_user: User = Depends(require_admin),
    users: UserService = Depends(get_user_service),
) -> User:
    return await users.create_user(
        executor_role=current_user.role_code,
        name=body.name,
        email=body.email,
        password=body.password,
        target_role=body.role_code,
    )


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    _admin: User = Depends(require_admin),
    users: UserService = Depends(get_user_service),
) -> User:
    return await users.get_user(user_id)


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    body: UserUpdate,
    current_user: User = Depends(require_admin),
    users: UserService = Depends(get_user_service),
) -> User:
    """Partial update. Omitted fields are left unchanged."""
    return await users.update_user(
        executor_role=current_user.role_code,
        user_id=user_id,
        name=body.name,
        email=body.email,
        password=body.password,
        target_role=body.role_code,
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    _admin: User = Depends(require_admin),
    users: UserService = Depends(get_user_service),
) -> Response:
    await users.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
