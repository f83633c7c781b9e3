"""Fixtures do cliente da loja: backend falso via httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from api.connectors.storefront import ApiService, StorefrontClientConfig, StorefrontHttpClient
from app.infra.stores.memory_token_store import MemoryTokenStore
from app.sessions.auth_session import AuthSession

TEST_ORIGIN = "http://testserver"


class FakeBackend:
    """Responde por (método, path) e registra as requisições recebidas."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response | Exception] = {}

    def on(self, method: str, path: str, response: httpx.Response | Exception) -> None:
        self._routes[(method, path)] = response

    def reply(self, method: str, path: str, status_code: int = 200, body: Any = None) -> None:
        self.on(method, path, httpx.Response(status_code, json=body))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "Rota não encontrada"})
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def session(token_store: MemoryTokenStore) -> AuthSession:
    return AuthSession(token_store)


@pytest.fixture
def mock_client(backend: FakeBackend) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(backend), base_url=TEST_ORIGIN)


@pytest.fixture
def http(session: AuthSession, mock_client: httpx.AsyncClient) -> StorefrontHttpClient:
    return StorefrontHttpClient(session, config=StorefrontClientConfig(), client=mock_client)


@pytest.fixture
def api(session: AuthSession, mock_client: httpx.AsyncClient) -> ApiService:
    return ApiService(session, config=StorefrontClientConfig(), client=mock_client)
