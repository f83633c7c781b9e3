"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- asctime
- level
- logger (name)
- message
- run_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "run_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,120",
            "level": "INFO",
            "logger": "api.connectors.storefront.http_client",
            "message": "storefront_request",
            "run_id": "",
            "service": "skina-ecopecas",
            "endpoint": "/products"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
