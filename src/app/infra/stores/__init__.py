"""Stores — implementações concretas de persistência do token.

Módulos disponíveis:
    - memory_token_store: Store em memória para desenvolvimento/testes
    - file_token_store: Store em arquivo JSON (compartilhado na máquina)
    - redis_token_store: Store em Redis (compartilhado entre hosts)
"""

from __future__ import annotations

from app.infra.stores.file_token_store import FileTokenStore
from app.infra.stores.memory_token_store import MemoryTokenStore
from app.infra.stores.redis_token_store import RedisTokenStore

__all__ = [
    "FileTokenStore",
    "MemoryTokenStore",
    "RedisTokenStore",
]
