"""Connector das rotas de pagamento (cartão e PIX)."""

from api.connectors.payments.client import (
    PaymentClientConfig,
    PaymentService,
    create_payment_service,
)

__all__ = ["PaymentClientConfig", "PaymentService", "create_payment_service"]
