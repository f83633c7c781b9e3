"""Validação client-side dos payloads de pagamento (cartão e PIX).

Função pura: acumula todas as violações em vez de parar na primeira.
Lista vazia significa payload completo para o tipo informado.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from app.domain.payment import PaymentKind

AMOUNT_REQUIRED = "Valor da transação é obrigatório e deve ser maior que zero"
DESCRIPTION_REQUIRED = "Descrição é obrigatória"
PAYER_EMAIL_REQUIRED = "Email do pagador é obrigatório"
PAYER_IDENTIFICATION_REQUIRED = "Identificação do pagador é obrigatória"
CARD_TOKEN_REQUIRED = "Token do cartão é obrigatório"
PAYMENT_METHOD_REQUIRED = "Método de pagamento é obrigatório"
INSTALLMENTS_REQUIRED = "Número de parcelas é obrigatório e deve ser maior que zero"
PIX_FIRST_NAME_REQUIRED = "Nome do pagador é obrigatório para PIX"
PIX_LAST_NAME_REQUIRED = "Sobrenome do pagador é obrigatório para PIX"

PAYMENT_KINDS: tuple[PaymentKind, ...] = ("card", "pix")


def _as_dict(value: Any) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, dict):
        return value
    return {}


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _common_errors(data: dict[str, Any], payer: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    amount = _number(data.get("transaction_amount"))
    if amount is None or amount <= 0:
        errors.append(AMOUNT_REQUIRED)
    if not data.get("description"):
        errors.append(DESCRIPTION_REQUIRED)
    if not payer.get("email"):
        errors.append(PAYER_EMAIL_REQUIRED)

    identification = _as_dict(payer.get("identification"))
    if not identification.get("type") or not identification.get("number"):
        errors.append(PAYER_IDENTIFICATION_REQUIRED)
    return errors


def _card_errors(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    if not data.get("token"):
        errors.append(CARD_TOKEN_REQUIRED)
    if not data.get("payment_method_id"):
        errors.append(PAYMENT_METHOD_REQUIRED)
    installments = _number(data.get("installments"))
    if installments is None or installments < 1:
        errors.append(INSTALLMENTS_REQUIRED)
    return errors


def _pix_errors(payer: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    if not payer.get("first_name"):
        errors.append(PIX_FIRST_NAME_REQUIRED)
    if not payer.get("last_name"):
        errors.append(PIX_LAST_NAME_REQUIRED)
    return errors


def validate_payment_data(data: BaseModel | dict[str, Any], kind: PaymentKind) -> list[str]:
    """Valida payload de pagamento.

    Args:
        data: CardPaymentRequest, PixPaymentRequest ou dict equivalente
        kind: "card" ou "pix"

    Returns:
        Mensagens de erro, na ordem das regras (vazia se válido).

    Raises:
        ValueError: Se kind não for "card" nem "pix".
    """
    if kind not in PAYMENT_KINDS:
        raise ValueError(f"Tipo de pagamento inválido: {kind}")

    payload = _as_dict(data)
    payer = _as_dict(payload.get("payer"))

    errors = _common_errors(payload, payer)
    if kind == "card":
        errors.extend(_card_errors(payload))
    else:
        errors.extend(_pix_errors(payer))
    return errors
