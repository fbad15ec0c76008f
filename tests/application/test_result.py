"""Tests for the uniform result envelope."""

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.result import CREATED, execute
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import StoreFailure
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeCartRepository,
    FakeOrderRepository,
    FakeProductRepository,
    StoreDown,
)


def _repos():
    product = Product(id="A", name="Widget", description="w", price=Money.of("10.00"), category="c")
    return FakeOrderRepository(), FakeCartRepository(), FakeProductRepository([product])


class TestExecute:

    def test_success_carries_data(self):
        _, cart_repo, product_repo = _repos()
        result = execute(AddToCartHandler(cart_repo, product_repo).handle, "alice", "A", 2)

        assert result.ok
        assert result.status_hint == 200
        assert result.error_kind is None
        assert result.data.total_amount == "$20.00"

    def test_created_status_hint(self):
        order_repo, cart_repo, product_repo = _repos()
        AddToCartHandler(cart_repo, product_repo).handle("alice", "A", 1)

        result = execute(
            CreateOrderHandler(order_repo, cart_repo, product_repo).handle,
            "alice",
            status_hint=CREATED,
        )

        assert result.ok
        assert result.status_hint == 201

    def test_invalid_input(self):
        _, cart_repo, product_repo = _repos()
        result = execute(AddToCartHandler(cart_repo, product_repo).handle, "alice", "A", 0)

        assert not result.ok
        assert (result.error_kind, result.status_hint) == ("InvalidInput", 400)
        assert result.data is None

    def test_not_found(self):
        order_repo, _, _ = _repos()
        result = execute(ShowOrderHandler(order_repo).handle, 42, "alice")
        assert (result.error_kind, result.status_hint) == ("NotFound", 404)
        assert result.error == "Order not found"

    def test_invalid_state(self):
        order_repo, cart_repo, product_repo = _repos()
        result = execute(CreateOrderHandler(order_repo, cart_repo, product_repo).handle, "alice")
        assert (result.error_kind, result.status_hint) == ("InvalidState", 400)
        assert result.error == "Cart is empty"

    def test_invalid_state_message_names_current_status(self):
        order_repo, cart_repo, product_repo = _repos()
        AddToCartHandler(cart_repo, product_repo).handle("alice", "A", 1)
        order = CreateOrderHandler(order_repo, cart_repo, product_repo).handle("alice")
        handler = UpdateOrderStatusHandler(order_repo)
        handler.handle(order.id, "alice", "delivered")

        result = execute(handler.handle, order.id, "alice", "processing")

        assert result.error_kind == "InvalidState"
        assert "'delivered'" in result.error

    def test_store_failure_wraps_original_exception(self):
        _, cart_repo, product_repo = _repos()
        cart_repo.fail_on_save = True

        result = execute(AddToCartHandler(cart_repo, product_repo).handle, "alice", "A", 1)

        assert (result.error_kind, result.status_hint) == ("StoreFailure", 500)
        assert result.error == "cart store unavailable"
        assert isinstance(result.exception, StoreFailure)
        assert isinstance(result.exception.__cause__, StoreDown)
