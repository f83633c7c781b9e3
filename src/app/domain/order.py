"""Pedidos criados no checkout."""

from __future__ import annotations

from pydantic import Field

from app.domain.base import StorefrontModel


class OrderItemInput(StorefrontModel):
    product_id: str
    quantity: int = Field(ge=1)


class ShippingAddress(StorefrontModel):
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str
    zip_code: str


class OrderInput(StorefrontModel):
    items: list[OrderItemInput]
    shipping_address: ShippingAddress
    customer_name: str
    customer_email: str
    customer_phone: str
    cpf: str | None = None
    payment_method: str
    shipping_cost: float | None = None


class OrderSummary(StorefrontModel):
    """Pedido como listado; nunca alterado pelo cliente."""

    id: str
    order_number: str = ""
    status: str = ""
    payment_status: str | None = None
    total: float = 0.0
    customer_name: str | None = None
    customer_email: str | None = None
    tracking_code: str | None = None
    created_at: str | None = None
