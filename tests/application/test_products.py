"""Integration tests for the catalog use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductQuery
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _catalog() -> FakeProductRepository:
    now = datetime.now(timezone.utc)
    rows = [
        ("1", "Widget", "Blue widget", "15.00", "tools", 3),
        ("2", "Gadget", "Handy gadget", "25.00", "tools", 2),
        ("3", "Teapot", "Ceramic teapot with widget lid", "12.00", "kitchen", 1),
        ("4", "Kettle", "Steel kettle", "30.00", "kitchen", 0),
    ]
    return FakeProductRepository([
        Product(
            id=pid,
            name=name,
            description=desc,
            price=Money.of(price),
            category=cat,
            created_at=now - timedelta(days=age),
        )
        for pid, name, desc, price, cat, age in rows
    ])


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        first = handler.handle("Widget", "Blue widget", "15.00", "tools")
        second = handler.handle("Gadget", "Handy gadget", "25.00", "tools")
        assert (first.id, second.id) == ("1", "2")
        assert repo.get_by_id("2").price == Money.of("25.00")

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than 0"):
            AddProductHandler(FakeProductRepository()).handle("Widget", "d", "0", "tools")

    def test_unparseable_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(FakeProductRepository()).handle("Widget", "d", "cheap", "tools")

    def test_price_below_one_cent_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="decimal places"):
            AddProductHandler(repo).handle("Widget", "Blue widget", "0.004", "tools")
        assert repo.list_all() == []

    def test_non_numeric_ids_are_skipped_when_assigning(self):
        repo = FakeProductRepository([
            Product(id="sku-9", name="Legacy", description="d", price=Money.of("1.00"), category="c"),
            Product(id="4", name="Widget", description="d", price=Money.of("2.00"), category="c"),
        ])
        dto = AddProductHandler(repo).handle("Gadget", "Handy gadget", "25.00", "tools")
        assert dto.id == "5"

    def test_first_id_when_only_non_numeric_ids_exist(self):
        repo = FakeProductRepository([
            Product(id="sku-9", name="Legacy", description="d", price=Money.of("1.00"), category="c"),
        ])
        dto = AddProductHandler(repo).handle("Gadget", "Handy gadget", "25.00", "tools")
        assert dto.id == "1"

    def test_nothing_saved_on_failure(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle("W", "d", "1.00", "tools")
        assert repo.list_all() == []


class TestUpdateProduct:

    def test_updates_only_given_fields(self):
        repo = _catalog()
        dto = UpdateProductHandler(repo).handle("1", price="17.50")
        assert dto.price == "$17.50"
        assert dto.name == "Widget"

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            UpdateProductHandler(_catalog()).handle("99", price="1.00")

    def test_non_positive_price_rejected(self):
        repo = _catalog()
        with pytest.raises(ValidationError, match="greater than 0"):
            UpdateProductHandler(repo).handle("1", price="0")
        assert repo.get_by_id("1").price == Money.of("15.00")


class TestDeleteAndShowProduct:

    def test_delete_then_show_is_not_found(self):
        repo = _catalog()
        DeleteProductHandler(repo).handle("1")
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(repo).handle("1")

    def test_delete_unknown(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            DeleteProductHandler(_catalog()).handle("99")

    def test_show(self):
        dto = ShowProductHandler(_catalog()).handle("3")
        assert dto.name == "Teapot"
        assert dto.category == "kitchen"


class TestListProducts:

    def test_default_is_newest_first(self):
        page = ListProductsHandler(_catalog()).handle()
        assert [p.id for p in page.products] == ["4", "3", "2", "1"]
        assert (page.total_products, page.total_pages, page.current_page) == (4, 1, 1)

    def test_category_filter(self):
        page = ListProductsHandler(_catalog()).handle(ProductQuery(category="kitchen"))
        assert {p.id for p in page.products} == {"3", "4"}

    def test_search_matches_name_or_description_case_insensitively(self):
        page = ListProductsHandler(_catalog()).handle(ProductQuery(search="WIDGET"))
        assert {p.id for p in page.products} == {"1", "3"}

    def test_multi_field_sort(self):
        page = ListProductsHandler(_catalog()).handle(ProductQuery(sort="category,-price"))
        assert [p.id for p in page.products] == ["4", "3", "2", "1"]

    def test_ascending_price(self):
        page = ListProductsHandler(_catalog()).handle(ProductQuery(sort="price"))
        assert [p.price for p in page.products] == ["$12.00", "$15.00", "$25.00", "$30.00"]

    def test_pagination(self):
        page = ListProductsHandler(_catalog()).handle(ProductQuery(page=2, limit=3, sort="name"))
        assert [p.name for p in page.products] == ["Widget"]
        assert page.total_pages == 2
        assert page.current_page == 2

    @pytest.mark.parametrize("query, message", [
        (ProductQuery(page=0), "Page must be greater than 0"),
        (ProductQuery(limit=0), "Limit must be between 1 and 100"),
        (ProductQuery(limit=101), "Limit must be between 1 and 100"),
        (ProductQuery(sort="colour"), "Cannot sort by 'colour'"),
    ])
    def test_invalid_queries(self, query, message):
        with pytest.raises(ValidationError, match=message):
            ListProductsHandler(_catalog()).handle(query)
