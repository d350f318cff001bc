"""User-role definitions through the admin API."""

import pytest
from httpx import AsyncClient

ROLES = "/api/v1/admin/user-roles"


async def _role_id(client: AsyncClient, headers, code: str) -> int:
    roles = (await client.get(ROLES, headers=headers)).json()
    return next(r["id"] for r in roles if r["code"] == code)


@pytest.mark.asyncio
async def test_system_roles_are_seeded(async_client: AsyncClient, admin_headers):
    resp = await async_client.get(ROLES, headers=admin_headers)
    assert resp.status_code == 200
    roles = {r["code"]: r for r in resp.json()}
    assert set(roles) == {"SUPER_ADMIN", "ADMIN", "CUSTOMER"}
    assert all(r["is_system"] for r in roles.values())


@pytest.mark.asyncio
async def test_create_custom_role_normalises_code(async_client: AsyncClient, admin_headers):
    resp = await async_client.post(
        ROLES, json={"code": " support ", "name": "Support", "description": "Helpdesk"}, headers=admin_headers
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["code"] == "SUPPORT"
    assert data["is_system"] is False


@pytest.mark.asyncio
async def test_duplicate_role_code(async_client: AsyncClient, admin_headers):
    resp = await async_client.post(ROLES, json={"code": "admin", "name": "Again"}, headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["error"] == "RoleCodeExists"


@pytest.mark.asyncio
async def test_malformed_role_code(async_client: AsyncClient, admin_headers):
    resp = await async_client.post(ROLES, json={"code": "a-b", "name": "Bad"}, headers=admin_headers)
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidRoleCode"


@pytest.mark.asyncio
async def test_search_roles(async_client: AsyncClient, admin_headers):
    await async_client.post(ROLES, json={"code": "WAREHOUSE", "name": "Warehouse staff"}, headers=admin_headers)
    resp = await async_client.get(ROLES, params={"q": "ware"}, headers=admin_headers)
    assert [r["code"] for r in resp.json()] == ["WAREHOUSE"]


@pytest.mark.asyncio
async def test_update_role_keeps_code(async_client: AsyncClient, admin_headers):
    created = (
        await async_client.post(ROLES, json={"code": "SUPPORT", "name": "Support"}, headers=admin_headers)
    ).json()
    resp = await async_client.patch(
        f"{ROLES}/{created['id']}", json={"name": "Customer support"}, headers=admin_headers
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Customer support"
    assert resp.json()["code"] == "SUPPORT"


@pytest.mark.asyncio
async def test_system_role_cannot_be_deleted(async_client: AsyncClient, admin_headers):
    role_id = await _role_id(async_client, admin_headers, "CUSTOMER")
    resp = await async_client.delete(f"{ROLES}/{role_id}", headers=admin_headers)
    assert resp.status_code == 422
    assert resp.json()["error"] == "RoleImmutable"


@pytest.mark.asyncio
async def test_role_in_use_cannot_be_deleted(async_client: AsyncClient, super_admin_headers):
    created = (
        await async_client.post(ROLES, json={"code": "SUPPORT", "name": "Support"}, headers=super_admin_headers)
    ).json()
    await async_client.post(
        "/api/v1/admin/users",
        json={"name": "Sam", "email": "sam@example.com", "password": "pw123456", "role_code": "SUPPORT"},
        headers=super_admin_headers,
    )

    resp = await async_client.delete(f"{ROLES}/{created['id']}", headers=super_admin_headers)
    assert resp.status_code == 422
    assert resp.json()["error"] == "RoleInUse"


@pytest.mark.asyncio
async def test_delete_custom_role(async_client: AsyncClient, admin_headers):
    created = (
        await async_client.post(ROLES, json={"code": "TEMP_ROLE", "name": "Temp"}, headers=admin_headers)
    ).json()
    resp = await async_client.delete(f"{ROLES}/{created['id']}", headers=admin_headers)
    assert resp.status_code == 204

    resp = await async_client.get(f"{ROLES}/{created['id']}", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "RoleNotFound"


@pytest.mark.asyncio
async def test_customer_cannot_manage_roles(async_client: AsyncClient, customer_headers):
    resp = await async_client.get(ROLES, headers=customer_headers)
    assert resp.status_code == 403
