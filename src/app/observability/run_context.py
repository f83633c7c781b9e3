"""run_id da execução atual, injetado em todos os logs.

Cada execução de script (ou sessão do cliente) recebe um run_id
próprio, o que permite filtrar os logs de uma migração específica.
Usa ContextVar, então vale por thread/tarefa async.

Uso:
    from app.observability import get_run_id, set_run_id

    token = set_run_id()
    try:
        ...
    finally:
        reset_run_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_run_id: ContextVar[str] = ContextVar("run_id", default="")


def get_run_id() -> str:
    """Retorna o run_id atual (vazio se não definido)."""
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> Token[str]:
    """Define o run_id; sem argumento gera um novo.

    Returns:
        Token para reset_run_id().
    """
    return _run_id.set(run_id or generate_run_id())


def reset_run_id(token: Token[str]) -> None:
    _run_id.reset(token)


def generate_run_id() -> str:
    return uuid.uuid4().hex[:12]
