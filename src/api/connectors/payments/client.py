"""PaymentService: adaptador das rotas de pagamento (Mercado Pago via backend).

Cartão, PIX e status devolvem o JSON do backend sem checar o status
HTTP: o corpo carrega `success`/`error` e quem chama decide. Só falhas
de rede ou de parse viram PaymentServiceError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel

from api.validators.documents import validate_cnpj, validate_cpf
from api.validators.payments import validate_payment_data
from config.settings.payments import DEFAULT_PAYMENTS_BASE_URL, DEFAULT_PAYMENTS_ORIGIN
from utils.currency import format_currency
from utils.errors import PaymentServiceError

if TYPE_CHECKING:
    from app.domain.payment import (
        CardPaymentRequest,
        PaymentKind,
        PaymentResponse,
        PaymentStatusResponse,
        PixPaymentRequest,
    )
    from config.settings.payments import PaymentSettings

logger = logging.getLogger(__name__)

PAYMENT_METHODS_ERROR_MESSAGE = "Erro ao buscar métodos de pagamento"


@dataclass
class PaymentClientConfig:
    base_url: str = DEFAULT_PAYMENTS_BASE_URL
    origin: str = DEFAULT_PAYMENTS_ORIGIN
    timeout_seconds: float | None = None

    @classmethod
    def from_settings(cls, settings: PaymentSettings) -> PaymentClientConfig:
        return cls(
            base_url=settings.base_url,
            origin=settings.origin,
            timeout_seconds=settings.timeout_seconds,
        )


def _request_body(data: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return dict(data)


class PaymentService:
    """Cliente das rotas fixas de pagamento.

    Rotas (sob base_url):
    - POST /process_payment (cartão)
    - POST /process_pix
    - GET /{payment_id}
    - GET /methods
    """

    def __init__(
        self,
        config: PaymentClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or PaymentClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._config.origin,
            timeout=self._config.timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> PaymentService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def create_card_payment(
        self, data: CardPaymentRequest | dict[str, Any]
    ) -> PaymentResponse:
        """Processa pagamento com cartão tokenizado."""
        response = await self._send("POST", "/process_payment", "card_payment", _request_body(data))
        return self._parse(response, "card_payment")

    async def create_pix_payment(
        self, data: PixPaymentRequest | dict[str, Any]
    ) -> PaymentResponse:
        """Gera cobrança PIX (qr_code, qr_code_base64, ticket_url)."""
        response = await self._send("POST", "/process_pix", "pix_payment", _request_body(data))
        return self._parse(response, "pix_payment")

    async def get_payment_status(self, payment_id: str) -> PaymentStatusResponse:
        response = await self._send("GET", f"/{payment_id}", "payment_status")
        return self._parse(response, "payment_status")

    async def get_payment_methods(self) -> Any:
        """Métodos de pagamento disponíveis (`data` da resposta).

        Raises:
            PaymentServiceError: status não-2xx ou `success` falso.
        """
        response = await self._send("GET", "/methods", "payment_methods")
        if not response.is_success:
            message = f"HTTP error! status: {response.status_code}"
            self._log_failure("payment_methods", message, response.status_code)
            raise PaymentServiceError(message, status_code=response.status_code)

        body = self._parse(response, "payment_methods")
        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            message = error or PAYMENT_METHODS_ERROR_MESSAGE
            self._log_failure("payment_methods", message, response.status_code)
            raise PaymentServiceError(message, status_code=response.status_code)
        return body.get("data")

    # Helpers puros expostos pelo adaptador

    @staticmethod
    def validate_payment_data(data: BaseModel | dict[str, Any], kind: PaymentKind) -> list[str]:
        return validate_payment_data(data, kind)

    @staticmethod
    def validate_cpf(value: str) -> bool:
        return validate_cpf(value)

    @staticmethod
    def validate_cnpj(value: str) -> bool:
        return validate_cnpj(value)

    @staticmethod
    def format_currency(value: float | int | Decimal) -> str:
        return format_currency(value)

    async def _send(
        self,
        method: str,
        path: str,
        operation: str,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self._config.base_url}{path}"
        try:
            return await self._client.request(
                method,
                url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TransportError as exc:
            message = f"Erro de rede: {exc.__class__.__name__}"
            self._log_failure(operation, message, None)
            raise PaymentServiceError(message) from exc

    def _parse(self, response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            message = "Resposta inválida do servidor de pagamentos"
            self._log_failure(operation, message, response.status_code)
            raise PaymentServiceError(message, status_code=response.status_code) from exc

    @staticmethod
    def _log_failure(operation: str, message: str, status_code: int | None) -> None:
        logger.error(
            "payment_request_failed",
            extra={
                "operation": operation,
                "status_code": status_code,
                "error_message": message,
            },
        )


def create_payment_service(
    settings: PaymentSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> PaymentService:
    """Factory para PaymentService com config do ambiente."""
    from config.settings import get_payment_settings

    payments = settings or get_payment_settings()
    return PaymentService(config=PaymentClientConfig.from_settings(payments), client=client)
