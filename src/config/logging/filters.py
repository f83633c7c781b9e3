"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- service: nome do serviço (ex: skina-ecopecas)
- run_id: identificador da execução (script ou sessão do cliente)

Campos mascarados: qualquer atributo `extra` cujo nome indique credencial
(token, password, authorization). Bearer tokens nunca chegam ao handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "***"

SENSITIVE_FIELD_MARKERS = ("token", "password", "authorization", "secret")


def _is_sensitive(field_name: str) -> bool:
    lowered = field_name.lower()
    return any(marker in lowered for marker in SENSITIVE_FIELD_MARKERS)


class ContextFilter(logging.Filter):
    """Injeta service e run_id em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        run_id_getter: Função que retorna o run_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        run_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_run_id = run_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # run_id passado explicitamente via `extra` tem precedência
        existing = getattr(record, "run_id", None)
        record.run_id = existing if existing else self._get_run_id()
        record.service = self._service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Mascara valores de campos `extra` com nomes sensíveis.

    Não filtra registros, apenas substitui os valores por REDACTED.
    """

    _STANDARD_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    )

    def filter(self, record: logging.LogRecord) -> bool:
        for name in list(record.__dict__):
            if name in self._STANDARD_ATTRS:
                continue
            if _is_sensitive(name) and record.__dict__[name]:
                record.__dict__[name] = REDACTED
        return True
