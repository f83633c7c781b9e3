"""Token store em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios. Compartilhado apenas entre
clientes que recebem a mesma instância.
"""

from __future__ import annotations

from app.protocols.token_store import TokenStoreProtocol


class MemoryTokenStore(TokenStoreProtocol):
    """Token store em memória, apenas para dev/test."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
