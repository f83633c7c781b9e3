"""Bootstrap — composition root do cliente e dos scripts.

Configura logging, valida settings e conecta implementações concretas
(token store, sessão, clientes HTTP) aos protocolos.

Uso:
    from app.bootstrap import create_api_client, initialize_app

    initialize_app()
    async with create_api_client() as api:
        await api.get_products()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.clients import create_database_engine, create_redis_client
from app.bootstrap.dependencies import (
    create_api_client,
    create_auth_session,
    create_payment_client,
    create_token_store,
)
from app.observability import get_run_id, set_run_id
from config.logging import configure_logging
from config.settings import (
    get_api_settings,
    get_base_settings,
    get_payment_settings,
)

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(level: str | None = None) -> None:
    """Configura logging JSON com service e run_id.

    Deve ser chamada uma vez no início do processo. Gera um run_id
    novo para a execução.
    """
    log_level = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    set_run_id()
    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        run_id_getter=get_run_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings do cliente e de pagamentos.

    Em `staging`/`production` falha rápido; em `development` só alerta.

    Returns:
        Lista de erros (vazia = OK).

    Raises:
        RuntimeError: Erros em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"api: {error}" for error in get_api_settings().validate(base))
    errors.extend(f"payments: {error}" for error in get_payment_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


__all__ = [
    "create_api_client",
    "create_auth_session",
    "create_database_engine",
    "create_payment_client",
    "create_redis_client",
    "create_token_store",
    "initialize_app",
    "validate_runtime_settings",
]
