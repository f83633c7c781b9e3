"""Envelope canônico das respostas do backend.

Algumas rotas respondem `{success, data, message}`, outras devolvem
o recurso direto. A normalização acontece uma única vez, na borda;
cada operação decide se usa `payload` (desembrulhado) ou `raw`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def is_present(value: Any) -> bool:
    """Presença no sentido do backend: objetos e listas vazias contam."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float, str)):
        return bool(value)
    return True


def unwrap_data(body: Any) -> Any:
    """`data` quando presente no corpo; senão o corpo inteiro.

    Usado pelas rotas públicas, que respondem ora `{success, data}`,
    ora o recurso direto.
    """
    if isinstance(body, dict) and is_present(body.get("data")):
        return body["data"]
    return body


@dataclass(frozen=True)
class ApiEnvelope:
    """Resposta de sucesso normalizada.

    Attributes:
        raw: Corpo JSON completo, sem alterações
        success: Flag `success` do corpo (False se ausente)
        data: Campo `data` do corpo, quando houver
        message: Campo `message` do corpo, quando for texto
    """

    raw: Any
    success: bool = False
    data: Any = None
    message: str | None = None

    @property
    def payload(self) -> Any:
        """`data` quando success e data estão presentes; senão o corpo inteiro."""
        if self.success and is_present(self.data):
            return self.data
        return self.raw


def normalize_envelope(body: Any) -> ApiEnvelope:
    """Converte qualquer corpo JSON em ApiEnvelope."""
    if not isinstance(body, dict):
        return ApiEnvelope(raw=body)

    message = body.get("message")
    return ApiEnvelope(
        raw=body,
        success=is_present(body.get("success")),
        data=body.get("data"),
        message=message if isinstance(message, str) else None,
    )
