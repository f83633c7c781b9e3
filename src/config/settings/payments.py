"""Settings do adaptador de pagamentos (cartão/PIX)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PAYMENTS_BASE_URL = "/api/payments"
DEFAULT_PAYMENTS_ORIGIN = "http://localhost:3001"


@dataclass(frozen=True)
class PaymentSettings:
    """Configurações das rotas de pagamento do backend.

    Attributes:
        base_url: Prefixo fixo das rotas de pagamento
        origin: Origem usada para resolver base_url relativo
        timeout_seconds: Timeout por requisição (None = sem timeout)
    """

    base_url: str = DEFAULT_PAYMENTS_BASE_URL
    origin: str = DEFAULT_PAYMENTS_ORIGIN
    timeout_seconds: float | None = None

    def validate(self) -> list[str]:
        """Valida configurações de pagamento."""
        errors: list[str] = []
        if not self.base_url:
            errors.append("PAYMENTS_BASE_URL não pode ser vazio")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("API_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_payments_from_env() -> PaymentSettings:
    """Carrega PaymentSettings de variáveis de ambiente."""
    raw_timeout = os.getenv("API_TIMEOUT_SECONDS", "").strip()
    return PaymentSettings(
        base_url=os.getenv("PAYMENTS_BASE_URL", DEFAULT_PAYMENTS_BASE_URL).rstrip("/"),
        origin=os.getenv("API_ORIGIN", DEFAULT_PAYMENTS_ORIGIN).rstrip("/"),
        timeout_seconds=float(raw_timeout) if raw_timeout else None,
    )


@lru_cache(maxsize=1)
def get_payment_settings() -> PaymentSettings:
    """Retorna instância cacheada de PaymentSettings."""
    return _load_payments_from_env()
