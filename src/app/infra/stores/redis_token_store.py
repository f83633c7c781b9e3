"""Redis Token Store: token compartilhado entre hosts.

Útil quando vários workers/admins automatizados usam a mesma
credencial: um `set_token` em qualquer processo vale para todos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.token_store import TokenStoreProtocol
from utils.errors import TokenStoreError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo para namespace de tokens
TOKEN_PREFIX = "storefront:"


class RedisTokenStore(TokenStoreProtocol):
    """Token store usando Redis.

    Sem TTL: o token não expira localmente, apenas no backend.

    Args:
        redis_client: Cliente Redis síncrono
    """

    def __init__(self, redis_client: Redis[bytes]) -> None:
        self._redis = redis_client

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{TOKEN_PREFIX}{key}"

    def get(self, key: str) -> str | None:
        try:
            value = self._redis.get(self._key(key))
        except RedisError as exc:
            raise TokenStoreError(f"Falha ao ler token do Redis: {key}") from exc
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set(self, key: str, value: str) -> None:
        try:
            self._redis.set(self._key(key), value)
        except RedisError as exc:
            raise TokenStoreError(f"Falha ao gravar token no Redis: {key}") from exc
        logger.debug("token_saved", extra={"key": key})

    def delete(self, key: str) -> None:
        try:
            self._redis.delete(self._key(key))
        except RedisError as exc:
            raise TokenStoreError(f"Falha ao remover token do Redis: {key}") from exc
        logger.debug("token_deleted", extra={"key": key})
