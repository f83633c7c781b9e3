"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (script ou bootstrap do cliente)
    configure_logging(level="INFO", service_name="skina-ecopecas")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("storefront_request", extra={"endpoint": "/products"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import ContextFilter, SensitiveDataFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "skina-ecopecas"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    run_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez por processo.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        run_id_getter: Função opcional que retorna o run_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ContextFilter(service_name, run_id_getter))
    handler.addFilter(SensitiveDataFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_tolerated_error(
    logger: logging.Logger,
    component: str,
    reason: str,
    detail: str | None = None,
) -> None:
    """Log de erro conhecido tratado como sucesso.

    Usado quando uma falha é esperada e idempotente, como objetos
    de banco que já existem ao reexecutar uma migração.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "001_create_tables.sql").
        reason: Classificação curta (ex: "already_exists").
        detail: Mensagem original do erro, quando útil.
    """
    extra: dict[str, object] = {
        "tolerated": True,
        "component": component,
        "reason": reason,
    }
    if detail:
        extra["detail"] = detail

    logger.warning(
        "Tolerated error in %s",
        component,
        extra=extra,
    )
