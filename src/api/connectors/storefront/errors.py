"""Extração da mensagem de erro dos corpos de erro do backend da loja."""

from __future__ import annotations

from typing import Any

VALIDATION_ERROR_MESSAGE = "Erro de validação"
REQUEST_ERROR_MESSAGE = "Erro na requisição"
NETWORK_ERROR = "Erro de rede"
IMAGE_LOAD_ERROR_MESSAGE = "Erro ao carregar imagem"
PHONE_FORMAT_MESSAGE = "Por favor, insira o telefone no formato correto (ex: 11987654321)"


def network_error_body(status_code: int, reason: str) -> dict[str, str]:
    """Corpo sintético usado quando a resposta de erro não é JSON."""
    return {
        "error": NETWORK_ERROR,
        "message": f"HTTP {status_code}: {reason}",
    }


def _first_present(*values: Any) -> str | None:
    for value in values:
        if value:
            return str(value)
    return None


def extract_error_message(body: Any, *, use_validation_errors: bool = True) -> str:
    """Escolhe a melhor mensagem disponível no corpo de erro.

    Ordem de preferência:
    1. errors[0].msg / errors[0].message (lista de validação não vazia)
    2. message / error
    3. mensagem genérica

    Args:
        body: Corpo de erro decodificado (qualquer JSON)
        use_validation_errors: False ignora a lista `errors`

    Returns:
        Mensagem para a exceção.
    """
    if not isinstance(body, dict):
        return REQUEST_ERROR_MESSAGE

    errors = body.get("errors")
    if use_validation_errors and isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict):
            message = _first_present(first.get("msg"), first.get("message"))
            if message:
                return message
        return VALIDATION_ERROR_MESSAGE

    return _first_present(body.get("message"), body.get("error")) or REQUEST_ERROR_MESSAGE


def is_phone_format_error(message: str) -> bool:
    """True se o backend recusou o telefone informado no cadastro."""
    return "telefone" in message or "phone" in message
