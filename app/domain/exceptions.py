"""
Domain errors — one class per business-rule failure.

Every error carries a machine-readable ``code`` and the HTTP status the
transport layer answers with.  Services raise these before any repository
mutation; the handlers in ``app.core.exceptions`` turn them into JSON.
"""

from __future__ import annotations


class ShopError(Exception):
    """Base class for all storefront business errors."""

    code: str = "ShopError"
    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# ── Validation / business-rule violations (422) ────────────────────
class InvalidCredential(ShopError):
    code = "InvalidCredential"
    status_code = 422
    default_message = "Invalid credential"


class InvalidRoleCode(ShopError):
    code = "InvalidRoleCode"
    status_code = 422
    default_message = "Invalid role code"


class CannotAssignRole(ShopError):
    code = "CannotAssignRole"
    status_code = 422
    default_message = "Cannot assign role"


class InvalidQuantity(ShopError):
    code = "InvalidQuantity"
    status_code = 422
    default_message = "Quantity must be positive"


class OutOfStock(ShopError):
    code = "OutOfStock"
    status_code = 422
    default_message = "Product out of stock"


class InvalidPayment(ShopError):
    code = "InvalidPayment"
    status_code = 422
    default_message = "Invalid payment method"


class EmptyOrderItems(ShopError):
    code = "EmptyOrderItems"
    status_code = 422
    default_message = "No items to checkout"


class CheckoutValidation(ShopError):
    code = "CheckoutValidation"
    status_code = 422
    default_message = "Checkout validation failed"


class InvalidStatus(ShopError):
    code = "InvalidStatus"
    status_code = 422
    default_message = "Invalid order status"


class RoleImmutable(ShopError):
    code = "RoleImmutable"
    status_code = 422
    default_message = "System role cannot be modified"


class RoleInUse(ShopError):
    code = "RoleInUse"
    status_code = 422
    default_message = "Role is in use"


class CategoryInvalidName(ShopError):
    code = "CategoryInvalidName"
    status_code = 422
    default_message = "Category name is required"


class CategoryInvalidSlug(ShopError):
    code = "CategoryInvalidSlug"
    status_code = 422
    default_message = "Invalid category slug"


# ── Conflicts (409) ────────────────────────────────────────────────
class EmailAlreadyUsed(ShopError):
    code = "EmailAlreadyUsed"
    status_code = 409
    default_message = "Email already used"


class RoleCodeExists(ShopError):
    code = "RoleCodeExists"
    status_code = 409
    default_message = "Role code already exists"


class CategorySlugExists(ShopError):
    code = "CategorySlugExists"
    status_code = 409
    default_message = "Category slug already exists"


# ── Missing entities (404) ─────────────────────────────────────────
class UserNotFound(ShopError):
    code = "UserNotFound"
    status_code = 404
    default_message = "User not found"


class ProductNotFound(ShopError):
    code = "ProductNotFound"
    status_code = 404
    default_message = "Product not found"


class OrderNotFound(ShopError):
    code = "OrderNotFound"
    status_code = 404
    default_message = "Order not found"


class RoleNotFound(ShopError):
    code = "RoleNotFound"
    status_code = 404
    default_message = "Role not found"


class CategoryNotFound(ShopError):
    code = "CategoryNotFound"
    status_code = 404
    default_message = "Category not found"


# ── Authentication (401) ───────────────────────────────────────────
class Unauthorized(ShopError):
    code = "Unauthorized"
    status_code = 401
    default_message = "Incorrect email or password"
