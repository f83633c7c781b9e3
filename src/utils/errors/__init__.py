"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    MigrationError,
    PaymentServiceError,
    StorefrontApiError,
    TokenStoreError,
)

__all__ = [
    "InfrastructureError",
    "MigrationError",
    "PaymentServiceError",
    "StorefrontApiError",
    "TokenStoreError",
]
