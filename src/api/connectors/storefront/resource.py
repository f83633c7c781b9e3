"""Base comum dos grupos de operações do ApiService."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from app.domain.base import StorefrontModel

if TYPE_CHECKING:
    from api.connectors.storefront.http_client import StorefrontHttpClient

JsonPayload = dict[str, Any]


def to_payload(data: BaseModel | JsonPayload) -> JsonPayload:
    """Serializa modelo ou dict para o corpo JSON da requisição."""
    if isinstance(data, StorefrontModel):
        return data.to_api()
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return dict(data)


class StorefrontResource:
    """Acesso ao transporte compartilhado pelos mixins de operações."""

    _http: StorefrontHttpClient
