"""Testes dos DTOs da loja (aliases camelCase, extras, query params)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain import (
    AddressInput,
    Cart,
    Category,
    OrderItemInput,
    Pagination,
    Product,
    ProductFilters,
    ShippingOption,
    Slide,
    to_query_params,
)


class TestStorefrontModel:
    """Aliases e serialização."""

    def test_parses_camel_case_payload(self) -> None:
        product = Product.model_validate(
            {
                "id": "p1",
                "name": "Farol Gol G5",
                "originalPrice": 350.0,
                "discountPrice": 299.9,
                "inStock": 4,
                "viewCount": 12,
            }
        )
        assert product.original_price == 350.0
        assert product.discount_price == 299.9
        assert product.view_count == 12

    def test_extra_fields_are_preserved(self) -> None:
        product = Product.model_validate({"id": "p1", "name": "X", "warranty": "3 meses"})
        assert product.to_api()["warranty"] == "3 meses"

    def test_to_api_uses_camel_case_without_none(self) -> None:
        address = AddressInput(
            title="Casa",
            recipient_name="Ana",
            street="Rua A",
            number="10",
            neighborhood="Centro",
            city="Curitiba",
            state="PR",
            zip_code="80000-000",
        )
        payload = address.to_api()
        assert payload["recipientName"] == "Ana"
        assert payload["zipCode"] == "80000-000"
        assert "complement" not in payload
        assert "isDefault" not in payload

    def test_effective_price_prefers_discount(self) -> None:
        assert Product(id="1", name="a", original_price=10, discount_price=8).effective_price == 8
        assert Product(id="1", name="a", original_price=10).effective_price == 10

    def test_cart_defaults_summary(self) -> None:
        cart = Cart.model_validate({"id": "c1"})
        assert cart.items == []
        assert cart.summary.total == 0.0

    def test_cart_reads_backend_totals(self) -> None:
        cart = Cart.model_validate(
            {
                "id": 7,
                "sessionId": "s1",
                "userId": 42,
                "totals": {"subtotal": 50, "shippingCost": 15, "total": 65, "totalItems": 1},
            }
        )
        assert cart.id == "7"
        assert cart.user_id == "42"
        assert cart.summary.shipping == 15.0
        assert cart.summary.total == 65.0
        assert cart.to_api()["totals"]["shippingCost"] == 15.0

    def test_numeric_ids_become_strings(self) -> None:
        assert Category.model_validate({"id": 3, "name": "Freios"}).id == "3"
        assert Slide.model_validate({"id": 9, "title": "Home"}).id == "9"

    def test_order_item_requires_positive_quantity(self) -> None:
        with pytest.raises(ValidationError):
            OrderItemInput(product_id="p1", quantity=0)


class TestPagination:
    """Total com nome variável por recurso."""

    @pytest.mark.parametrize("field", ["totalProducts", "totalOrders", "totalUsers"])
    def test_total_reads_any_variant(self, field: str) -> None:
        pagination = Pagination.model_validate({"currentPage": 2, field: 42})
        assert pagination.current_page == 2
        assert pagination.total == 42

    def test_total_defaults_to_zero(self) -> None:
        assert Pagination().total == 0


class TestToQueryParams:
    """Conversão de filtros em query string."""

    def test_none_returns_empty(self) -> None:
        assert to_query_params(None) == {}

    def test_model_filters(self) -> None:
        filters = ProductFilters(category="Faróis", min_price=10.5, in_stock=True, page=2)
        assert to_query_params(filters) == {
            "category": "Faróis",
            "minPrice": "10.5",
            "inStock": "true",
            "page": "2",
        }

    def test_dict_filters_drop_none_and_format_bools(self) -> None:
        params = {"featured": False, "search": None, "limit": 5}
        assert to_query_params(params) == {"featured": "false", "limit": "5"}


class TestShippingOption:
    def test_is_available_without_error(self) -> None:
        option = ShippingOption.model_validate(
            {"id": "1", "name": "PAC", "price": 25.5, "delivery_range": {"min": 3, "max": 5}}
        )
        assert option.is_available
        assert option.delivery_range.max == 5

    def test_unavailable_with_error(self) -> None:
        option = ShippingOption(id="2", name="SEDEX", error="Transportadora indisponível")
        assert not option.is_available
