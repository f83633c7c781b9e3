"""Carrinho de compras.

O resumo (subtotal, frete, total) é recalculado no servidor e
aceito como veio. O backend o envia em `totals`, com o frete em
`shippingCost`; `summary`/`shipping` também são aceitos.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field

from app.domain.base import StorefrontModel


class CartItem(StorefrontModel):
    id: str
    product_id: str
    name: str = ""
    price: float = 0.0
    original_price: float = 0.0
    discount_price: float | None = None
    image: str | None = None
    image_url: str | None = None
    brand: str | None = None
    quantity: int = 1
    in_stock: int | bool | None = None
    stock_quantity: int | None = None
    added_at: str | None = None

    @property
    def unit_price(self) -> float:
        """Preço unitário cobrado (mesma regra do backend)."""
        return self.discount_price or self.price or self.original_price


class CartSummary(StorefrontModel):
    subtotal: float = 0.0
    shipping: float = Field(
        default=0.0,
        validation_alias=AliasChoices("shippingCost", "shipping_cost", "shipping"),
        serialization_alias="shippingCost",
    )
    total: float = 0.0
    total_items: int = 0
    free_shipping: bool = False


class Cart(StorefrontModel):
    """Carrinho como serializado pelo backend (`Cart.toJSON`)."""

    id: str
    session_id: str | None = None
    user_id: str | None = None
    items: list[CartItem] = Field(default_factory=list)
    summary: CartSummary = Field(
        default_factory=CartSummary,
        validation_alias=AliasChoices("totals", "summary"),
        serialization_alias="totals",
    )
    created_at: str | None = None
    updated_at: str | None = None
