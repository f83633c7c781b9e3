"""Operações de catálogo de produtos."""

from __future__ import annotations

from typing import Any

from api.connectors.storefront.envelope import is_present, unwrap_data
from api.connectors.storefront.resource import StorefrontResource
from app.domain.base import to_query_params
from app.domain.product import Brand, Product, ProductDetail, ProductFilters, ProductList
from utils.errors import StorefrontApiError


class ProductOperations(StorefrontResource):
    async def get_products(
        self, filters: ProductFilters | dict[str, Any] | None = None
    ) -> ProductList:
        """Lista pública de produtos, filtrada e paginada."""
        body = await self._http.public_request("/products", params=to_query_params(filters))
        return ProductList.model_validate(unwrap_data(body))

    async def get_product(self, product_id: str) -> ProductDetail:
        """Detalhe público de um produto.

        O backend responde `{success, data}`; relacionados ainda não
        são servidos, então `related_products` vem sempre vazio.
        """
        body = await self._http.public_request(f"/products/{product_id}")
        product = body.get("data") if isinstance(body, dict) else None
        if not is_present(product):
            raise StorefrontApiError("Produto não encontrado", payload=body)
        return ProductDetail(product=Product.model_validate(product), related_products=[])

    async def get_featured_products(self) -> ProductList:
        body = await self._http.public_request("/products/featured")
        return ProductList.model_validate(unwrap_data(body))

    async def get_products_by_category(
        self,
        category: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Produtos de uma categoria: `data` quando presente, senão o corpo."""
        body = await self._http.public_request(
            f"/products/category/{category}", params=to_query_params(params)
        )
        return unwrap_data(body)

    async def get_brands(self) -> list[Brand]:
        body = await self._http.public_request("/products/brands")
        data = body.get("data") if isinstance(body, dict) else None
        brands = data.get("brands", []) if isinstance(data, dict) else []
        return [Brand.model_validate(item) for item in brands]

    async def get_admin_products(
        self, filters: ProductFilters | dict[str, Any] | None = None
    ) -> ProductList:
        """Lista de produtos do admin (inclui inativos)."""
        body = await self._http.request("/admin/products", params=to_query_params(filters))
        return ProductList.model_validate(body)
