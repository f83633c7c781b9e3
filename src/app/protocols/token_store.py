"""Protocolo de persistência do bearer token.

Equivale ao armazenamento chave/valor do navegador: uma string por chave,
sobrevive a reinícios e é compartilhada por todos os clientes que
apontam para o mesmo store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenStoreProtocol(ABC):
    """Contrato mínimo de armazenamento do token."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...
