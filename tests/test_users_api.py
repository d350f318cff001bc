"""Admin user management through the HTTP API."""

import pytest
from httpx import AsyncClient

USERS = "/api/v1/admin/users"


def _payload(email: str = "new@example.com", role_code: str = "CUSTOMER", **overrides) -> dict:
    body = {"name": "New User", "email": email, "password": "pw123456", "role_code": role_code}
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_admin_cannot_create_admin(async_client: AsyncClient, admin_headers):
    resp = await async_client.post(USERS, json=_payload(role_code="ADMIN"), headers=admin_headers)
    assert resp.status_code == 422
    assert resp.json()["error"] == "CannotAssignRole"

    listed = (await async_client.get(USERS, headers=admin_headers)).json()
    assert "new@example.com" not in [u["email"] for u in listed]


@pytest.mark.asyncio
async def test_super_admin_creates_admin(async_client: AsyncClient, super_admin_headers):
    resp = await async_client.post(
        USERS, json=_payload(email="Boss@Example.com", role_code="admin"), headers=super_admin_headers
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["role_code"] == "ADMIN"
    assert data["email"] == "boss@example.com"
    assert "password" not in data and "password_hash" not in data


@pytest.mark.asyncio
async def test_admin_creates_customer(async_client: AsyncClient, admin_headers):
    resp = await async_client.post(USERS, json=_payload(), headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["role_code"] == "CUSTOMER"


@pytest.mark.asyncio
async def test_customer_forbidden(async_client: AsyncClient, customer_headers):
    resp = await async_client.post(USERS, json=_payload(), headers=customer_headers)
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_invalid_role_code(async_client: AsyncClient, super_admin_headers):
    resp = await async_client.post(USERS, json=_payload(role_code="no"), headers=super_admin_headers)
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidRoleCode"


@pytest.mark.asyncio
async def test_unknown_role_code(async_client: AsyncClient, super_admin_headers):
    resp = await async_client.post(USERS, json=_payload(role_code="GHOST"), headers=super_admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "RoleNotFound"


@pytest.mark.asyncio
async def test_duplicate_email(async_client: AsyncClient, admin_headers, customer):
    resp = await async_client.post(USERS, json=_payload(email=customer.email), headers=admin_headers)
    assert resp.status_code == 409
    assert resp.json()["error"] == "EmailAlreadyUsed"


@pytest.mark.asyncio
async def test_list_users_filtered_by_role(async_client: AsyncClient, admin_headers, customer):
    resp = await async_client.get(USERS, params={"role": "customer"}, headers=admin_headers)
    assert resp.status_code == 200
    assert [u["email"] for u in resp.json()] == [customer.email]


@pytest.mark.asyncio
async def test_update_user_partial(async_client: AsyncClient, admin_headers, customer):
    resp = await async_client.patch(f"{USERS}/{customer.id}", json={"name": "Alicia"}, headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Alicia"
    assert data["email"] == customer.email
    assert data["role_code"] == "CUSTOMER"


@pytest.mark.asyncio
async def test_admin_cannot_promote_to_admin(async_client: AsyncClient, admin_headers, customer):
    resp = await async_client.patch(
        f"{USERS}/{customer.id}", json={"name": "Sneaky", "role_code": "ADMIN"}, headers=admin_headers
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "CannotAssignRole"

    after = (await async_client.get(f"{USERS}/{customer.id}", headers=admin_headers)).json()
    assert after["name"] == "Alice"
    assert after["role_code"] == "CUSTOMER"


@pytest.mark.asyncio
async def test_super_admin_promotes_to_admin(async_client: AsyncClient, super_admin_headers, customer):
    resp = await async_client.patch(
        f"{USERS}/{customer.id}", json={"role_code": "ADMIN"}, headers=super_admin_headers
    )
    assert resp.status_code == 200
    assert resp.json()["role_code"] == "ADMIN"


@pytest.mark.asyncio
async def test_update_email_to_taken_address(async_client: AsyncClient, admin, admin_headers, customer):
    resp = await async_client.patch(
        f"{USERS}/{customer.id}", json={"email": admin.email}, headers=admin_headers
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "EmailAlreadyUsed"


@pytest.mark.asyncio
async def test_delete_user(async_client: AsyncClient, admin_headers, customer):
    resp = await async_client.delete(f"{USERS}/{customer.id}", headers=admin_headers)
    assert resp.status_code == 204

    resp = await async_client.get(f"{USERS}/{customer.id}", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "UserNotFound"


@pytest.mark.asyncio
async def test_delete_missing_user(async_client: AsyncClient, admin_headers):
    resp = await async_client.delete(f"{USERS}/9999", headers=admin_headers)
    assert resp.status_code == 404
