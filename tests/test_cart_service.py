"""CartService unit tests with mocked repositories."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.domain.cart import CartLine
from app.domain.enums import PaymentMethod
from app.domain.exceptions import (
    EmptyOrderItems,
    InvalidPayment,
    InvalidQuantity,
    OutOfStock,
    ProductNotFound,
)
from app.services.cart_service import CartService


def _product(pid: int = 1, stock: int = 5, price: float = 10.0, is_active: bool = True):
    return SimpleNamespace(id=pid, name=f"P{pid}", price=price, stock=stock, is_active=is_active)


@pytest.fixture
def cart_mocks():
    carts = AsyncMock()
    products = AsyncMock()
    orders = AsyncMock()
    carts.get_quantity = AsyncMock(return_value=0)
    carts.list_items = AsyncMock(return_value=[])
    products.get_by_id = AsyncMock(return_value=_product())
    return CartService(carts, products, orders), carts, products, orders


@pytest.mark.parametrize("qty", [0, -3])
async def test_non_positive_quantity_never_reaches_storage(cart_mocks, qty):
    svc, carts, products, _ = cart_mocks
    with pytest.raises(InvalidQuantity):
        await svc.add_to_cart(1, 1, qty)
    products.get_by_id.assert_not_called()
    carts.add_or_update_item.assert_not_called()


async def test_missing_product(cart_mocks):
    svc, carts, products, _ = cart_mocks
    products.get_by_id = AsyncMock(return_value=None)
    with pytest.raises(ProductNotFound):
        await svc.add_to_cart(1, 99, 1)
    carts.add_or_update_item.assert_not_called()


async def test_inactive_product_reported_as_missing(cart_mocks):
    svc, carts, products, _ = cart_mocks
    products.get_by_id = AsyncMock(return_value=_product(is_active=False))
    with pytest.raises(ProductNotFound):
        await svc.add_to_cart(1, 1, 1)
    carts.add_or_update_item.assert_not_called()


async def test_stock_check_counts_quantity_already_in_cart(cart_mocks):
    svc, carts, _, _ = cart_mocks
    carts.get_quantity = AsyncMock(return_value=4)
    with pytest.raises(OutOfStock):
        await svc.add_to_cart(1, 1, 2)
    carts.add_or_update_item.assert_not_called()


async def test_add_up_to_exact_stock(cart_mocks):
    svc, carts, _, _ = cart_mocks
    carts.get_quantity = AsyncMock(return_value=3)
    await svc.add_to_cart(1, 1, 2)
    carts.add_or_update_item.assert_awaited_once_with(1, 1, 2)


async def test_get_cart_drops_unresolvable_lines(cart_mocks):
    svc, carts, products, _ = cart_mocks
    carts.list_items = AsyncMock(return_value=[CartLine(1, 2), CartLine(2, 1)])
    products.get_by_ids = AsyncMock(return_value=[_product(pid=1, price=10.0)])

    view = await svc.get_cart(42)

    assert view.user_id == 42
    assert len(view.items) == 1
    assert view.items[0].product_id == 1
    assert view.items[0].quantity == 2
    assert view.items[0].price == 10.0


async def test_get_empty_cart(cart_mocks):
    svc, _, products, _ = cart_mocks
    view = await svc.get_cart(42)
    assert view.items == []
    products.get_by_ids.assert_not_called()


async def test_checkout_rejects_unknown_payment_before_reading_cart(cart_mocks):
    svc, carts, _, orders = cart_mocks
    with pytest.raises(InvalidPayment):
        await svc.checkout(1, "BITCOIN")
    carts.list_items.assert_not_called()
    orders.create_from_cart.assert_not_called()


async def test_checkout_empty_cart(cart_mocks):
    svc, _, _, orders = cart_mocks
    with pytest.raises(EmptyOrderItems):
        await svc.checkout(1, "COD")
    orders.create_from_cart.assert_not_called()


async def test_checkout_delegates_to_order_transaction(cart_mocks):
    svc, carts, _, orders = cart_mocks
    lines = [CartLine(1, 2)]
    carts.list_items = AsyncMock(return_value=lines)
    orders.create_from_cart = AsyncMock(
        return_value=SimpleNamespace(id=5, items=[object()], total_amount=20.0)
    )

    order = await svc.checkout(1, "TAMARA")

    orders.create_from_cart.assert_awaited_once_with(1, lines, PaymentMethod.TAMARA)
    assert order.id == 5
