"""Base dos DTOs trocados com o backend da loja.

O backend fala camelCase; os modelos expõem snake_case e aceitam
campos extras (o backend pode acrescentar campos a qualquer momento).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StorefrontModel(BaseModel):
    """Modelo base com aliases camelCase e campos extras preservados."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        # ids seriais do PostgreSQL chegam como número
        coerce_numbers_to_str=True,
    )

    def to_api(self) -> dict[str, Any]:
        """Serializa para o formato do backend (camelCase, sem None)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Pagination(StorefrontModel):
    """Paginação das listagens.

    O total vem com nome diferente por recurso (totalProducts,
    totalOrders, totalUsers); os três são aceitos.
    """

    current_page: int = 1
    total_pages: int = 1
    total_products: int | None = None
    total_orders: int | None = None
    total_users: int | None = None
    has_next: bool = False
    has_prev: bool = False

    @property
    def total(self) -> int:
        for value in (self.total_products, self.total_orders, self.total_users):
            if value is not None:
                return value
        return 0


class HealthStatus(StorefrontModel):
    status: str
    message: str = ""
    timestamp: str = ""
    version: str = ""


def to_query_params(params: StorefrontModel | dict[str, Any] | None) -> dict[str, str]:
    """Converte filtros em query params.

    Remove valores None; booleanos viram "true"/"false".
    """
    if params is None:
        return {}
    raw = params.to_api() if isinstance(params, StorefrontModel) else params

    query: dict[str, str] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query
