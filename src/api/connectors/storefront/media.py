"""Imagens de produtos (upload multipart e leitura binária)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from api.connectors.storefront.http_client import UploadFile
from api.connectors.storefront.resource import StorefrontResource


class ImageOperations(StorefrontResource):
    async def upload_product_images(
        self,
        product_id: str,
        files: Sequence[UploadFile],
    ) -> Any:
        """Envia imagens no campo multipart `images` (um part por arquivo)."""
        return await self._http.request(
            f"/admin/products/{product_id}/images",
            "POST",
            files=[("images", upload) for upload in files],
        )

    async def get_product_images(self, product_id: str) -> Any:
        return await self._http.request(f"/products/{product_id}/images")

    async def get_image_data(self, image_id: str) -> bytes:
        return await self._http.fetch_bytes(f"/admin/images/{image_id}")

    async def set_primary_image(self, product_id: str, image_id: str) -> Any:
        return await self._http.request(
            f"/admin/products/{product_id}/images/{image_id}/primary", "PUT"
        )

    async def delete_image(self, image_id: str) -> Any:
        return await self._http.request(f"/admin/images/{image_id}", "DELETE")
