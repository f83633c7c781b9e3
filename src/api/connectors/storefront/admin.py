"""Operações administrativas (usuários, pedidos, produtos, cupons).

Todas usam o caminho autenticado. Rotas cujo formato de resposta
não é estável devolvem o JSON como veio (dict/list).
"""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.resource import StorefrontResource, to_payload
from app.domain.base import to_query_params
from app.domain.catalog import CouponInput
from app.domain.user import AdminUserList


def map_admin_users(body: dict[str, Any]) -> dict[str, Any]:
    """Converte `status` do backend em `isActive` em cada usuário."""
    users = [
        {**user, "isActive": user.get("status") == "active"}
        for user in body.get("users") or []
    ]
    return {**body, "users": users}


class AdminOperations(StorefrontResource):
    async def get_admin_dashboard(self) -> Any:
        return await self._http.request("/admin/dashboard")

    async def get_admin_users(self, params: dict[str, Any] | None = None) -> AdminUserList:
        body = await self._http.request("/admin/users", params=to_query_params(params))
        return AdminUserList.model_validate(map_admin_users(body))

    async def get_admin_user_by_id(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}")

    async def update_user(self, user_id: str, data: dict[str, Any]) -> Any:
        return await self._http.request(f"/admin/users/{user_id}", "PUT", json=data)

    async def delete_user(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}", "DELETE")

    async def deactivate_user(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}/deactivate", "PUT")

    async def activate_user(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}/activate", "PUT")

    async def promote_user(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}/promote", "PUT")

    async def demote_user(self, user_id: str) -> Any:
        return await self._http.request(f"/admin/users/{user_id}/demote", "PUT")

    async def get_admin_orders(self, params: dict[str, Any] | None = None) -> Any:
        return await self._http.request("/admin/orders", params=to_query_params(params))

    async def get_admin_order_by_id(self, order_id: str) -> Any:
        return await self._http.request(f"/admin/orders/{order_id}")

    async def update_order_status(
        self,
        order_id: str,
        status: str,
        tracking_code: str | None = None,
    ) -> Any:
        body: dict[str, str] = {"status": status}
        if tracking_code:
            body["trackingCode"] = tracking_code
        return await self._http.request(f"/admin/orders/{order_id}/status", "PUT", json=body)

    async def delete_order(self, order_id: str) -> Any:
        return await self._http.request(f"/admin/orders/{order_id}", "DELETE")

    async def create_product(self, data: dict[str, Any]) -> Any:
        return await self._http.request("/admin/products", "POST", json=data)

    async def update_product(self, product_id: str, data: dict[str, Any]) -> Any:
        return await self._http.request(f"/admin/products/{product_id}", "PUT", json=data)

    async def delete_product(self, product_id: str) -> Any:
        return await self._http.request(f"/admin/products/{product_id}", "DELETE")

    async def reset_all_view_counts(self) -> Any:
        return await self._http.request("/admin/products/reset-views", "POST")

    async def create_coupon(self, data: CouponInput | dict[str, Any]) -> Any:
        return await self._http.request("/admin/coupons", "POST", json=to_payload(data))
