"""Produtos do catálogo e filtros de busca."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from app.domain.base import Pagination, StorefrontModel


class Product(StorefrontModel):
    """Produto como retornado pelo backend.

    `discount_price <= original_price` é garantido pelo backend,
    não validado aqui.
    """

    id: str
    name: str
    original_price: float = 0.0
    discount_price: float | None = None
    image: str | None = None
    image_url: str | None = None
    in_stock: int | bool = 0
    brand: str | None = None
    category: str | None = None
    description: str | None = None
    specifications: dict[str, Any] | None = None
    compatibility: list[str] | None = None
    sku: str | None = None
    featured: bool | None = None
    stock_quantity: int | None = None
    view_count: int | None = None
    width_cm: float | None = None
    height_cm: float | None = None
    length_cm: float | None = None
    weight_kg: float | None = None

    @property
    def effective_price(self) -> float:
        """Preço cobrado: desconto quando houver, senão o original."""
        if self.discount_price is not None:
            return self.discount_price
        return self.original_price


class ProductList(StorefrontModel):
    products: list[Product] = Field(default_factory=list)
    pagination: Pagination | None = None
    total: int | None = None


class ProductDetail(StorefrontModel):
    product: Product
    related_products: list[Product] = Field(default_factory=list)


class ProductFilters(StorefrontModel):
    """Filtros aceitos por /products e /admin/products."""

    category: str | None = None
    brand: str | None = None
    search: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock: bool | None = None
    page: int | None = None
    limit: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class Brand(StorefrontModel):
    id: str
    name: str
    product_count: int = 0


class ProductImage(StorefrontModel):
    id: str
    product_id: str
    image_name: str = ""
    image_size: int = 0
    is_primary: bool = False
    display_order: int = 0
    created_at: str | None = None
