"""Settings do cliente da API da loja.

Em desenvolvimento o backend é acessado pelo proxy local (/api).
Em produção a URL absoluta vem de API_BASE_URL.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

TokenStoreBackend = Literal["memory", "file", "redis"]

DEFAULT_API_BASE_URL = "/api"
DEFAULT_API_ORIGIN = "http://localhost:3001"
DEFAULT_AUTH_TOKEN_KEY = "auth_token"
DEFAULT_TOKEN_STORE_PATH = ".skina_ecopecas/auth.json"


@dataclass(frozen=True)
class ApiSettings:
    """Configurações do cliente HTTP da loja.

    Attributes:
        base_url: Prefixo de todas as rotas (relativo ou absoluto)
        origin: Origem usada para resolver base_url relativo
        base_url_configured: True se API_BASE_URL foi definido explicitamente
        timeout_seconds: Timeout por requisição (None = sem timeout)
        auth_token_key: Chave única onde o bearer token é persistido
        token_store_backend: Onde o token é persistido (memory|file|redis)
        token_store_path: Arquivo JSON usado pelo backend "file"
    """

    base_url: str = DEFAULT_API_BASE_URL
    origin: str = DEFAULT_API_ORIGIN
    base_url_configured: bool = False
    timeout_seconds: float | None = None
    auth_token_key: str = DEFAULT_AUTH_TOKEN_KEY
    token_store_backend: TokenStoreBackend = "memory"
    token_store_path: str = DEFAULT_TOKEN_STORE_PATH

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do cliente.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("API_BASE_URL não pode ser vazio")

        if base.is_production and not self.base_url_configured:
            errors.append("API_BASE_URL é obrigatório em production")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("API_TIMEOUT_SECONDS deve ser > 0")

        if not self.auth_token_key:
            errors.append("AUTH_TOKEN_KEY não pode ser vazio")

        if self.token_store_backend == "redis" and not base.redis_url:
            errors.append("TOKEN_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.token_store_backend == "file" and not self.token_store_path:
            errors.append("TOKEN_STORE_BACKEND=file requer TOKEN_STORE_PATH")

        return errors


def _parse_timeout(raw: str) -> float | None:
    """Converte API_TIMEOUT_SECONDS; vazio significa sem timeout."""
    if not raw.strip():
        return None
    return float(raw)


def _load_api_from_env() -> ApiSettings:
    """Carrega ApiSettings de variáveis de ambiente."""
    raw_base_url = os.getenv("API_BASE_URL", "")
    backend_str = os.getenv("TOKEN_STORE_BACKEND", "memory").lower()
    backend: TokenStoreBackend = (
        backend_str if backend_str in ("memory", "file", "redis") else "memory"
    )
    return ApiSettings(
        base_url=(raw_base_url or DEFAULT_API_BASE_URL).rstrip("/"),
        origin=os.getenv("API_ORIGIN", DEFAULT_API_ORIGIN).rstrip("/"),
        base_url_configured=bool(raw_base_url),
        timeout_seconds=_parse_timeout(os.getenv("API_TIMEOUT_SECONDS", "")),
        auth_token_key=os.getenv("AUTH_TOKEN_KEY", DEFAULT_AUTH_TOKEN_KEY),
        token_store_backend=backend,
        token_store_path=os.getenv("TOKEN_STORE_PATH", DEFAULT_TOKEN_STORE_PATH),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> ApiSettings:
    """Retorna instância cacheada de ApiSettings."""
    return _load_api_from_env()
