"""Unit tests for the CartPricingService domain service."""

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.cart_pricing_service import CartPricingService
from tests.fakes import FakeProductRepository


def _product(pid: str, price: str) -> Product:
    return Product(
        id=pid, name=f"P{pid}", description="d", price=Money.of(price), category="c"
    )


def _cart(*lines: tuple[str, int]) -> Cart:
    cart = Cart.empty("alice")
    for pid, qty in lines:
        cart.add(pid, Quantity(qty))
    return cart


class TestRecalculate:

    def test_sums_price_times_quantity(self):
        repo = FakeProductRepository([_product("A", "10.00"), _product("B", "5.00")])
        cart = _cart(("A", 2), ("B", 1))

        total = CartPricingService(repo).recalculate(cart)

        assert total == Money.of("25.00")
        assert cart.total_amount == Money.of("25.00")

    def test_empty_cart_totals_zero(self):
        cart = _cart()
        cart.total_amount = Money.of("99.00")
        CartPricingService(FakeProductRepository()).recalculate(cart)
        assert cart.total_amount == Money.zero()

    def test_reads_live_prices_every_time(self):
        repo = FakeProductRepository([_product("A", "10.00")])
        cart = _cart(("A", 3))
        svc = CartPricingService(repo)
        svc.recalculate(cart)

        product = repo.get_by_id("A")
        product.update(price=Money.of("12.00"))
        repo.save(product)

        assert svc.recalculate(cart) == Money.of("36.00")

    def test_one_catalog_read_per_line(self):
        repo = FakeProductRepository([_product("A", "1.00"), _product("B", "1.00")])
        cart = _cart(("A", 1), ("B", 1))
        CartPricingService(repo).recalculate(cart)
        assert repo.reads == 2

    def test_missing_product_contributes_nothing(self):
        repo = FakeProductRepository([_product("A", "10.00")])
        cart = _cart(("A", 1), ("GONE", 4))
        assert CartPricingService(repo).recalculate(cart) == Money.of("10.00")
