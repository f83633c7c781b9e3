"""Categorias, slides da home, cupons e health check."""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.envelope import unwrap_data
from api.connectors.storefront.http_client import UploadFile
from api.connectors.storefront.resource import StorefrontResource, to_payload
from app.domain.base import HealthStatus, to_query_params
from app.domain.catalog import CategoryList, SlideInput, SlideList

SLIDE_TEXT_FIELDS = ("title", "subtitle", "ctaText", "ctaLink")


def _slide_form(data: SlideInput | dict[str, Any], *, only_provided: bool) -> dict[str, str]:
    """Campos de texto do formulário de slide.

    Na criação os quatro campos vão sempre; na edição só os preenchidos.
    """
    payload = to_payload(data)
    form: dict[str, str] = {}
    for key in SLIDE_TEXT_FIELDS:
        value = payload.get(key)
        if value:
            form[key] = str(value)
        elif not only_provided:
            form[key] = ""
    is_active = payload.get("isActive")
    if only_provided and is_active is not None:
        form["isActive"] = "true" if is_active else "false"
    return form


class CatalogOperations(StorefrontResource):
    async def get_categories(self, featured: bool | None = None) -> CategoryList:
        """Categorias ativas; o backend responde `{success, data: {categories, total}}`."""
        body = await self._http.public_request(
            "/categories", params=to_query_params({"featured": featured})
        )
        return CategoryList.model_validate(unwrap_data(body))

    async def get_category(self, category_id: str) -> Any:
        """Categoria com estatísticas e produtos (passthrough)."""
        return await self._http.public_request(f"/categories/{category_id}")

    async def get_category_products(
        self,
        category_id: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._http.public_request(
            f"/categories/{category_id}/products", params=to_query_params(params)
        )

    async def get_slides(self) -> SlideList:
        body = await self._http.public_request("/slides")
        return SlideList.model_validate(unwrap_data(body))

    async def get_admin_slides(self) -> SlideList:
        body = await self._http.request("/slides/admin")
        return SlideList.model_validate(body)

    async def create_slide(self, data: SlideInput | dict[str, Any], image: UploadFile) -> Any:
        return await self._http.request(
            "/slides",
            "POST",
            data=_slide_form(data, only_provided=False),
            files=[("backgroundImage", image)],
        )

    async def update_slide(
        self,
        slide_id: str,
        data: SlideInput | dict[str, Any],
        image: UploadFile | None = None,
    ) -> Any:
        return await self._http.request(
            f"/slides/{slide_id}",
            "PUT",
            data=_slide_form(data, only_provided=True),
            files=[("backgroundImage", image)] if image else None,
        )

    async def delete_slide(self, slide_id: str) -> Any:
        return await self._http.request(f"/slides/{slide_id}", "DELETE")

    async def reorder_slides(self, slide_ids: list[str]) -> Any:
        return await self._http.request("/slides/reorder", "PUT", json={"slideIds": slide_ids})

    async def validate_coupon(self, code: str) -> Any:
        """Valida cupom do usuário logado (resposta não tipada)."""
        return await self._http.request("/coupons/validate", "POST", json={"code": code})

    async def health_check(self) -> HealthStatus:
        body = await self._http.request("/health")
        return HealthStatus.model_validate(body)
