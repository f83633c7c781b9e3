"""Cotação de frete.

As rotas de cálculo são públicas e devolvem o corpo completo
(`{success, message, data: {options, ...}}`).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from api.connectors.storefront.resource import StorefrontResource


def _shipping_payload(params: dict[str, Any]) -> dict[str, Any]:
    """Serializa produtos (ShippingProduct) aninhados nos parâmetros."""

    def dump(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(exclude_none=True)
        if isinstance(value, list):
            return [dump(item) for item in value]
        return value

    return {key: dump(value) for key, value in params.items() if value is not None}


class ShippingOperations(StorefrontResource):
    async def calculate_shipping(self, params: dict[str, Any]) -> Any:
        """Frete do carrinho (sessionId, fromCep, toCep)."""
        return await self._http.public_request(
            "/shipping/calculate", "POST", json=_shipping_payload(params)
        )

    async def calculate_shipping_direct(self, params: dict[str, Any]) -> Any:
        """Frete de uma lista explícita de pacotes (`products`)."""
        return await self._http.public_request(
            "/shipping/calculate-direct", "POST", json=_shipping_payload(params)
        )

    async def calculate_individual_shipping(self, params: dict[str, Any]) -> Any:
        """Frete de um único produto (`product`)."""
        return await self._http.public_request(
            "/shipping/calculate-individual", "POST", json=_shipping_payload(params)
        )

    async def test_shipping_service(self) -> Any:
        return await self._http.request("/shipping/test")

    async def test_individual_shipping(self) -> Any:
        return await self._http.request("/shipping/test-individual", "POST")
