"""Observabilidade — contexto de execução injetado nos logs."""

from app.observability.run_context import (
    generate_run_id,
    get_run_id,
    reset_run_id,
    set_run_id,
)

__all__ = [
    "generate_run_id",
    "get_run_id",
    "reset_run_id",
    "set_run_id",
]
