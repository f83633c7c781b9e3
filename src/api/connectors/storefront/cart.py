"""Operações do carrinho.

Sem `session_id` o backend cria (ou recupera pelo token) um carrinho
novo e devolve o id em `sessionId`.
"""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.resource import StorefrontResource
from app.domain.cart import Cart


class CartOperations(StorefrontResource):
    async def get_cart(self, session_id: str | None = None) -> Cart:
        """Carrinho da sessão; o id gerado volta em `Cart.session_id`."""
        endpoint = f"/cart/{session_id}" if session_id else "/cart"
        body = await self._http.request(endpoint)
        return Cart.model_validate(body)

    async def add_to_cart(
        self,
        product_id: str,
        quantity: int,
        session_id: str | None = None,
    ) -> Any:
        endpoint = f"/cart/{session_id}/items" if session_id else "/cart/items"
        return await self._http.request(
            endpoint,
            "POST",
            json={"productId": product_id, "quantity": quantity},
        )

    async def update_cart_item(self, session_id: str, item_id: str, quantity: int) -> Any:
        return await self._http.request(
            f"/cart/{session_id}/items/{item_id}",
            "PUT",
            json={"quantity": quantity},
        )

    async def remove_cart_item(self, session_id: str, item_id: str) -> Any:
        return await self._http.request(f"/cart/{session_id}/items/{item_id}", "DELETE")

    async def clear_cart(self, session_id: str) -> Any:
        return await self._http.request(f"/cart/{session_id}", "DELETE")
