"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="skina-ecopecas")
    logger = get_logger(__name__)
    logger.info("migration_executed", extra={"file": "001_create_tables.sql"})

Campos obrigatórios em todo log: run_id, service, level, logger,
message, asctime. Tokens e senhas são mascarados.
"""

from config.logging.config import configure_logging, get_logger, log_tolerated_error
from config.logging.filters import REDACTED, ContextFilter, SensitiveDataFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "ContextFilter",
    "SensitiveDataFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_tolerated_error",
]
