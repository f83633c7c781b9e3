"""Endereços de entrega do usuário logado."""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.resource import StorefrontResource, to_payload
from app.domain.user import AddressInput, UserAddress


class AddressOperations(StorefrontResource):
    async def get_addresses(self) -> list[UserAddress]:
        body = await self._http.request("/addresses")
        return [UserAddress.model_validate(item) for item in body or []]

    async def get_address(self, address_id: str) -> UserAddress:
        body = await self._http.request(f"/addresses/{address_id}")
        return UserAddress.model_validate(body)

    async def create_address(self, data: AddressInput | dict[str, Any]) -> UserAddress:
        body = await self._http.request("/addresses", "POST", json=to_payload(data))
        return UserAddress.model_validate(body)

    async def update_address(
        self,
        address_id: str,
        data: AddressInput | dict[str, Any],
    ) -> UserAddress:
        body = await self._http.request(
            f"/addresses/{address_id}", "PUT", json=to_payload(data)
        )
        return UserAddress.model_validate(body)

    async def delete_address(self, address_id: str) -> Any:
        return await self._http.request(f"/addresses/{address_id}", "DELETE")

    async def set_default_address(self, address_id: str) -> UserAddress:
        """Marca como padrão; o backend desmarca os demais."""
        body = await self._http.request(f"/addresses/{address_id}/default", "PATCH")
        return UserAddress.model_validate(body)
