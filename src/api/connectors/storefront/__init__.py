"""Connector do backend da loja (produtos, carrinho, pedidos, admin)."""

from api.connectors.storefront.client import ApiService, create_api_service
from api.connectors.storefront.envelope import ApiEnvelope, normalize_envelope
from api.connectors.storefront.errors import extract_error_message, network_error_body
from api.connectors.storefront.http_client import (
    StorefrontClientConfig,
    StorefrontHttpClient,
    UploadFile,
    create_storefront_http_client,
)

__all__ = [
    "ApiEnvelope",
    "ApiService",
    "StorefrontClientConfig",
    "StorefrontHttpClient",
    "UploadFile",
    "create_api_service",
    "create_storefront_http_client",
    "extract_error_message",
    "network_error_body",
    "normalize_envelope",
]
