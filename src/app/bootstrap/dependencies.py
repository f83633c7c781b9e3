"""Factories de token store, sessão e clientes baseadas no ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.payments import PaymentService, create_payment_service
from api.connectors.storefront import ApiService, create_api_service
from app.bootstrap.clients import create_redis_client
from app.infra.stores import FileTokenStore, MemoryTokenStore, RedisTokenStore
from app.sessions import AuthSession
from config.settings import get_api_settings, get_base_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.token_store import TokenStoreProtocol
    from config.settings import ApiSettings

logger = logging.getLogger(__name__)


def create_token_store(settings: ApiSettings | None = None) -> TokenStoreProtocol:
    """Cria o store do token conforme TOKEN_STORE_BACKEND."""
    api = settings or get_api_settings()
    backend = api.token_store_backend

    if backend == "redis":
        store: TokenStoreProtocol = RedisTokenStore(create_redis_client())
    elif backend == "file":
        store = FileTokenStore(api.token_store_path)
    elif backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryTokenStore()
    else:
        msg = f"TOKEN_STORE_BACKEND inválido: {backend}"
        raise ValueError(msg)

    logger.info("token_store_created", extra={"backend": backend})
    return store


def create_auth_session(
    store: TokenStoreProtocol | None = None,
    settings: ApiSettings | None = None,
) -> AuthSession:
    api = settings or get_api_settings()
    return AuthSession(store or create_token_store(api), key=api.auth_token_key)


def create_api_client(
    session: AuthSession | None = None,
    client: httpx.AsyncClient | None = None,
) -> ApiService:
    """ApiService com sessão do ambiente (ou a sessão informada)."""
    return create_api_service(session or create_auth_session(), client=client)


def create_payment_client(client: httpx.AsyncClient | None = None) -> PaymentService:
    return create_payment_service(client=client)
