"""Agregador de settings da Skina Ecopeças.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Cliente da loja
from config.settings.api import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_ORIGIN,
    DEFAULT_AUTH_TOKEN_KEY,
    ApiSettings,
    TokenStoreBackend,
    get_api_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Banco (scripts de manutenção)
from config.settings.database import (
    DatabaseSettings,
    get_database_settings,
)

# Pagamentos
from config.settings.payments import (
    DEFAULT_PAYMENTS_BASE_URL,
    PaymentSettings,
    get_payment_settings,
)

__all__ = [
    # Constants
    "DEFAULT_API_BASE_URL",
    "DEFAULT_API_ORIGIN",
    "DEFAULT_AUTH_TOKEN_KEY",
    "DEFAULT_PAYMENTS_BASE_URL",
    # API
    "ApiSettings",
    # Base
    "BaseSettings",
    # Database
    "DatabaseSettings",
    "Environment",
    # Payments
    "PaymentSettings",
    "TokenStoreBackend",
    "get_api_settings",
    "get_base_settings",
    "get_database_settings",
    "get_payment_settings",
]
