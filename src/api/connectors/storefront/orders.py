"""Operações de pedidos do cliente."""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.resource import StorefrontResource, to_payload
from app.domain.base import to_query_params
from app.domain.order import OrderInput


class OrderOperations(StorefrontResource):
    async def create_order(self, data: OrderInput | dict[str, Any]) -> Any:
        return await self._http.request("/orders", "POST", json=to_payload(data))

    async def get_orders(self, params: dict[str, Any] | None = None) -> Any:
        return await self._http.request("/orders", params=to_query_params(params))

    async def get_order_by_id(self, order_id: str) -> Any:
        """Pedido completo, sem desembrulhar `{success, data}`."""
        return await self._http.raw_request(f"/orders/{order_id}")
