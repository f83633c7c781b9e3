"""Exceções compartilhadas pelo cliente, pagamentos e scripts."""

from __future__ import annotations

from typing import Any


class StorefrontApiError(Exception):
    """Falha de uma chamada à API da loja.

    A mensagem é a melhor disponível no corpo de erro do backend
    (validação > message > error > mensagem genérica de rede).

    Attributes:
        status_code: Status HTTP; None quando a falha é de transporte.
        payload: Corpo de erro já decodificado, quando houver.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class PaymentServiceError(Exception):
    """Falha de rede ou de parse ao falar com as rotas de pagamento."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (banco, token store)."""


class MigrationError(InfrastructureError):
    """Falha ao executar um arquivo de migração."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(f"{file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


class TokenStoreError(InfrastructureError):
    """Falha ao ler ou gravar o token persistido."""
