"""
V1 API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, cart, catalog, orders, roles, users

api_router = APIRouter()

# Auth (login, refresh, register, me)
api_router.include_router(auth.router)

# Public catalog + admin catalog CRUD
api_router.include_router(catalog.router)

# Caller's cart, checkout, order history
api_router.include_router(cart.router)

# Admin: users, roles, orders
api_router.include_router(users.router)
api_router.include_router(roles.router)
api_router.include_router(orders.router)
