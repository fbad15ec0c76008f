"""Unit tests for the Product aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _create(**overrides) -> Product:
    fields = dict(
        product_id="1",
        name="Widget",
        description="A small widget",
        price=Money.of("15.00"),
        category="tools",
        image_url=None,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        product = _create(image_url="https://img.example.com/widget.png")
        assert product.name == "Widget"
        assert product.price == Money.of("15.00")
        assert product.image_url == "https://img.example.com/widget.png"

    def test_strips_whitespace(self):
        product = _create(name="  Widget  ", category=" tools ")
        assert product.name == "Widget"
        assert product.category == "tools"

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 characters"):
            _create(name="W")

    def test_missing_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            _create(description="  ")

    def test_missing_category_rejected(self):
        with pytest.raises(ValidationError, match="category is required"):
            _create(category="")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than 0"):
            _create(price=Money.zero())

    def test_price_with_fractions_of_a_cent_rejected(self):
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            _create(price=Money.of("0.004"))

    def test_trailing_zeros_do_not_count_as_decimal_places(self):
        assert _create(price=Money.of("15.000")).price == Money.of("15.00")

    def test_relative_image_url_rejected(self):
        with pytest.raises(ValidationError, match="valid URI"):
            _create(image_url="widget.png")


class TestProductUpdate:

    def test_partial_update_leaves_other_fields(self):
        product = _create()
        product.update(price=Money.of("20.00"))
        assert product.price == Money.of("20.00")
        assert product.name == "Widget"
        assert product.category == "tools"

    def test_update_validates(self):
        product = _create()
        with pytest.raises(ValidationError, match="greater than 0"):
            product.update(price=Money.zero())
        assert product.price == Money.of("15.00")

    def test_update_rejects_fractions_of_a_cent(self):
        product = _create()
        with pytest.raises(ValidationError, match="decimal places"):
            product.update(price=Money.of("9.999"))
        assert product.price == Money.of("15.00")
