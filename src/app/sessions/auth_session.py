"""AuthSession: ciclo de vida do bearer token do cliente da loja.

O token é relido do store antes de cada chamada autenticada, então
um `set_token`/`remove_token` feito por outro cliente que compartilha
o mesmo store vale na próxima requisição (read-your-writes).
Não há controle de expiração nem refresh: token vencido vira erro
de autenticação do backend como qualquer outro erro HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.settings.api import DEFAULT_AUTH_TOKEN_KEY

if TYPE_CHECKING:
    from app.protocols.token_store import TokenStoreProtocol

logger = logging.getLogger(__name__)


class AuthSession:
    """Sessão explícita passada ao cliente na construção.

    Args:
        store: Persistência do token
        key: Chave única do token no store
    """

    __slots__ = ("_key", "_store", "_token")

    def __init__(
        self,
        store: TokenStoreProtocol,
        key: str = DEFAULT_AUTH_TOKEN_KEY,
    ) -> None:
        self._store = store
        self._key = key
        self._token: str | None = store.get(key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def cached_token(self) -> str | None:
        """Último token visto por esta sessão, sem consultar o store."""
        return self._token

    def current_token(self) -> str | None:
        """Relê o token do store e atualiza o cache em memória."""
        stored = self._store.get(self._key)
        if stored != self._token:
            logger.debug("auth_token_refreshed_from_store", extra={"key": self._key})
        self._token = stored or None
        return self._token

    def set_token(self, token: str) -> None:
        """Grava o token em memória e no store."""
        self._token = token
        self._store.set(self._key, token)

    def remove_token(self) -> None:
        """Remove o token da memória e do store."""
        self._token = None
        self._store.delete(self._key)

    def authorization_header(self) -> dict[str, str]:
        """Header Authorization com o token atual, ou vazio sem token."""
        token = self.current_token()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}
