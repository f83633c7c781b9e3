"""Requisições e respostas de pagamento (cartão e PIX).

As rotas de pagamento falam snake_case (formato do Mercado Pago),
então estes modelos não usam aliases.
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict

PaymentKind = Literal["card", "pix"]


class PayerIdentification(BaseModel):
    """Documento do pagador (ex: type="CPF", number="52998224725")."""

    type: str
    number: str


class CardPayer(BaseModel):
    email: str
    identification: PayerIdentification


class PixPayer(BaseModel):
    email: str
    first_name: str
    last_name: str
    identification: PayerIdentification


class CardPaymentRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    transaction_amount: float
    token: str
    description: str
    installments: int
    payment_method_id: str
    issuer_id: str | None = None
    payer: CardPayer
    order_id: str | None = None

    @property
    def kind(self) -> PaymentKind:
        return "card"


class PixPaymentRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    transaction_amount: float
    description: str
    payer: PixPayer
    order_id: str | None = None

    @property
    def kind(self) -> PaymentKind:
        return "pix"


class PaymentResponse(TypedDict, total=False):
    """Resposta de /process_payment e /process_pix (repassada sem validação)."""

    success: bool
    payment: Any
    qr_code: str
    qr_code_base64: str
    ticket_url: str
    error: str
    errors: list[str]


class PaymentStatusResponse(TypedDict, total=False):
    success: bool
    payment: Any
    error: str
