"""Transporte HTTP do cliente da loja.

Três caminhos de requisição:
- request: autenticado, desembrulha `{success, data}`
- public_request: sem token, corpo bruto
- raw_request: autenticado, corpo bruto, erro só por message/error

Sem retry e sem timeout por padrão: cada falha vira
StorefrontApiError e é logada antes de propagar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.storefront.api_logging import log_api_error, log_success
from api.connectors.storefront.envelope import ApiEnvelope, normalize_envelope
from api.connectors.storefront.errors import (
    IMAGE_LOAD_ERROR_MESSAGE,
    NETWORK_ERROR,
    extract_error_message,
    network_error_body,
)
from config.settings.api import DEFAULT_API_BASE_URL, DEFAULT_API_ORIGIN
from utils.errors import StorefrontApiError

if TYPE_CHECKING:
    from app.sessions.auth_session import AuthSession
    from config.settings.api import ApiSettings

JSON_HEADERS = {"Content-Type": "application/json"}

# (nome do arquivo, conteúdo, content-type), formato aceito pelo httpx
UploadFile = tuple[str, bytes, str]


@dataclass
class StorefrontClientConfig:
    """Configuração do transporte.

    `base_url` relativo (ex: "/api") é resolvido contra `origin`;
    absoluto é usado como está.
    """

    base_url: str = DEFAULT_API_BASE_URL
    origin: str = DEFAULT_API_ORIGIN
    timeout_seconds: float | None = None
    default_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: ApiSettings) -> StorefrontClientConfig:
        return cls(
            base_url=settings.base_url,
            origin=settings.origin,
            timeout_seconds=settings.timeout_seconds,
        )


class StorefrontHttpClient:
    """Cliente HTTP com sessão de autenticação explícita.

    Args:
        session: Sessão que fornece o bearer token atual
        config: Configuração do transporte
        client: httpx.AsyncClient injetado (testes usam MockTransport).
            Quando omitido, o cliente é criado e fechado por esta instância.
    """

    def __init__(
        self,
        session: AuthSession,
        config: StorefrontClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._session = session
        self._config = config or StorefrontClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._config.origin,
            timeout=self._config.timeout_seconds,
        )

    @property
    def session(self) -> AuthSession:
        return self._session

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> StorefrontHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        files: list[tuple[str, UploadFile]] | None = None,
        data: dict[str, str] | None = None,
    ) -> Any:
        """Requisição autenticada; retorna `data` do envelope ou o corpo."""
        envelope = await self.request_envelope(
            endpoint, method, json=json, params=params, files=files, data=data
        )
        return envelope.payload

    async def request_envelope(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        files: list[tuple[str, UploadFile]] | None = None,
        data: dict[str, str] | None = None,
    ) -> ApiEnvelope:
        """Requisição autenticada; retorna o envelope normalizado."""
        multipart = files is not None or data is not None
        headers = self._build_headers(authenticated=True, multipart=multipart)
        response = await self._send(
            method, endpoint, headers, json=json, params=params, files=files, data=data
        )
        self._raise_for_error(response, method, endpoint)
        return normalize_envelope(self._parse_success_body(response, method, endpoint))

    async def public_request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Requisição sem token; retorna o corpo bruto."""
        headers = self._build_headers(authenticated=False)
        response = await self._send(method, endpoint, headers, json=json, params=params)
        self._raise_for_error(response, method, endpoint)
        return self._parse_success_body(response, method, endpoint)

    async def raw_request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Requisição autenticada sem desembrulhar o envelope.

        A lista `errors` do corpo de erro é ignorada.
        """
        headers = self._build_headers(authenticated=True)
        response = await self._send(method, endpoint, headers, params=params)
        self._raise_for_error(response, method, endpoint, use_validation_errors=False)
        return self._parse_success_body(response, method, endpoint)

    async def fetch_bytes(self, endpoint: str) -> bytes:
        """GET binário autenticado (ex: imagem de produto)."""
        headers = self._session.authorization_header()
        response = await self._send("GET", endpoint, headers)
        if not response.is_success:
            log_api_error("GET", endpoint, response.status_code, IMAGE_LOAD_ERROR_MESSAGE)
            raise StorefrontApiError(
                IMAGE_LOAD_ERROR_MESSAGE, status_code=response.status_code
            )
        return response.content

    def _build_headers(self, *, authenticated: bool, multipart: bool = False) -> dict[str, str]:
        # multipart: o httpx define o Content-Type com o boundary
        headers = {**self._config.default_headers}
        if not multipart:
            headers.update(JSON_HEADERS)
        if authenticated:
            headers.update(self._session.authorization_header())
        return headers

    async def _send(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str],
        **kwargs: Any,
    ) -> httpx.Response:
        url = f"{self._config.base_url}{endpoint}"
        request_kwargs = {key: value for key, value in kwargs.items() if value is not None}
        try:
            return await self._client.request(method, url, headers=headers, **request_kwargs)
        except httpx.TransportError as exc:
            message = f"{NETWORK_ERROR}: {exc.__class__.__name__}"
            log_api_error(method, endpoint, None, message)
            raise StorefrontApiError(message, status_code=None) from exc

    def _raise_for_error(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
        *,
        use_validation_errors: bool = True,
    ) -> None:
        if response.is_success:
            return

        try:
            body = response.json()
        except ValueError:
            body = network_error_body(response.status_code, response.reason_phrase)

        message = extract_error_message(body, use_validation_errors=use_validation_errors)
        log_api_error(method, endpoint, response.status_code, message)
        raise StorefrontApiError(message, status_code=response.status_code, payload=body)

    def _parse_success_body(self, response: httpx.Response, method: str, endpoint: str) -> Any:
        if not response.content:
            log_success(method, endpoint, response.status_code)
            return None
        try:
            body = response.json()
        except ValueError as exc:
            message = "Resposta inválida do servidor"
            log_api_error(method, endpoint, response.status_code, message)
            raise StorefrontApiError(message, status_code=response.status_code) from exc
        log_success(method, endpoint, response.status_code)
        return body


def create_storefront_http_client(
    session: AuthSession,
    settings: ApiSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> StorefrontHttpClient:
    """Factory com configuração carregada do ambiente.

    Args:
        session: Sessão de autenticação explícita
        settings: ApiSettings opcional. Se None, carrega do ambiente.
        client: httpx.AsyncClient opcional.
    """
    from config.settings import get_api_settings

    api = settings or get_api_settings()
    return StorefrontHttpClient(
        session=session,
        config=StorefrontClientConfig.from_settings(api),
        client=client,
    )
