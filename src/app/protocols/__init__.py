"""Protocolos e contratos do core da aplicação."""

from .token_store import TokenStoreProtocol

__all__ = [
    "TokenStoreProtocol",
]
