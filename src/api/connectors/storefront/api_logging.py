"""Helpers de logging do cliente da loja (sem tokens nem corpo de requisição)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_api_error(
    method: str,
    endpoint: str,
    status_code: int | None,
    message: str,
) -> None:
    """Loga falha HTTP ou de transporte antes de propagar."""
    logger.warning(
        "storefront_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "error_message": message,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "storefront_api_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
