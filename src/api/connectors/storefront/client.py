"""ApiService: fachada assíncrona do backend da loja.

Um método por endpoint, agrupados por recurso em mixins. O estado de
autenticação vive na AuthSession recebida na construção; não há
instância global.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.storefront.addresses import AddressOperations
from api.connectors.storefront.admin import AdminOperations
from api.connectors.storefront.auth import AuthOperations
from api.connectors.storefront.cart import CartOperations
from api.connectors.storefront.catalog import CatalogOperations
from api.connectors.storefront.http_client import (
    StorefrontClientConfig,
    StorefrontHttpClient,
)
from api.connectors.storefront.media import ImageOperations
from api.connectors.storefront.orders import OrderOperations
from api.connectors.storefront.products import ProductOperations
from api.connectors.storefront.shipping import ShippingOperations

if TYPE_CHECKING:
    import httpx

    from app.sessions.auth_session import AuthSession
    from config.settings.api import ApiSettings


class ApiService(
    ProductOperations,
    CartOperations,
    AuthOperations,
    OrderOperations,
    CatalogOperations,
    AdminOperations,
    ImageOperations,
    AddressOperations,
    ShippingOperations,
):
    """Cliente da API da loja.

    Args:
        session: Sessão com o bearer token (relido antes de cada chamada)
        config: Configuração do transporte
        client: httpx.AsyncClient opcional; sem ele um cliente próprio
            é criado e fechado em `aclose()`

    Example:
        >>> async with ApiService(AuthSession(MemoryTokenStore())) as api:
        ...     products = await api.get_products({"category": "Freios"})
    """

    def __init__(
        self,
        session: AuthSession,
        config: StorefrontClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._http = StorefrontHttpClient(session, config=config, client=client)

    @property
    def session(self) -> AuthSession:
        return self._http.session

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def set_token(self, token: str) -> None:
        """Grava o token; vale a partir da próxima requisição autenticada."""
        self._http.session.set_token(token)

    def remove_token(self) -> None:
        self._http.session.remove_token()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> ApiService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_api_service(
    session: AuthSession,
    settings: ApiSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ApiService:
    """Factory para ApiService com config do ambiente.

    Args:
        session: Sessão de autenticação explícita
        settings: ApiSettings opcional. Se None, carrega do ambiente.
        client: httpx.AsyncClient opcional.
    """
    from config.settings import get_api_settings

    api = settings or get_api_settings()
    return ApiService(
        session,
        config=StorefrontClientConfig.from_settings(api),
        client=client,
    )
