"""Testes das factories do bootstrap e da validação de settings."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

import app.bootstrap as bootstrap
from api.connectors.payments import PaymentService
from api.connectors.storefront import ApiService
from app.bootstrap import dependencies
from app.infra.stores import FileTokenStore, MemoryTokenStore, RedisTokenStore
from app.observability import get_run_id
from config.settings import ApiSettings, BaseSettings, DatabaseSettings, PaymentSettings


class TestCreateTokenStore:
    def test_memory_backend(self) -> None:
        store = dependencies.create_token_store(ApiSettings(token_store_backend="memory"))
        assert isinstance(store, MemoryTokenStore)

    def test_file_backend(self, tmp_path: Path) -> None:
        path = tmp_path / "auth.json"
        store = dependencies.create_token_store(
            ApiSettings(token_store_backend="file", token_store_path=str(path))
        )
        assert isinstance(store, FileTokenStore)
        assert store.path == path

    def test_redis_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        redis_client = MagicMock()
        monkeypatch.setattr(dependencies, "create_redis_client", lambda: redis_client)
        store = dependencies.create_token_store(ApiSettings(token_store_backend="redis"))
        assert isinstance(store, RedisTokenStore)
        store.set("auth_token", "abc")
        redis_client.set.assert_called_once_with("storefront:auth_token", "abc")


class TestSessionAndClients:
    def test_auth_session_uses_configured_key(self) -> None:
        store = MemoryTokenStore()
        session = dependencies.create_auth_session(
            store, ApiSettings(auth_token_key="admin_token")
        )
        session.set_token("x")
        assert store.get("admin_token") == "x"

    @pytest.mark.asyncio
    async def test_api_client(self) -> None:
        session = dependencies.create_auth_session(MemoryTokenStore(), ApiSettings())
        api = dependencies.create_api_client(session)
        assert isinstance(api, ApiService)
        assert api.session is session
        await api.aclose()

    @pytest.mark.asyncio
    async def test_payment_client(self) -> None:
        service = dependencies.create_payment_client()
        assert isinstance(service, PaymentService)
        await service.aclose()


class TestValidateRuntimeSettings:
    def _patch(
        self,
        monkeypatch: pytest.MonkeyPatch,
        base: BaseSettings,
        api: ApiSettings | None = None,
    ) -> None:
        monkeypatch.setattr(bootstrap, "get_base_settings", lambda: base)
        monkeypatch.setattr(bootstrap, "get_api_settings", lambda: api or ApiSettings())
        monkeypatch.setattr(bootstrap, "get_payment_settings", lambda: PaymentSettings())

    def test_valid_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch(monkeypatch, BaseSettings())
        assert bootstrap.validate_runtime_settings() == []

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch(monkeypatch, BaseSettings(), ApiSettings(token_store_backend="redis"))
        errors = bootstrap.validate_runtime_settings()
        assert errors == ["api: TOKEN_STORE_BACKEND=redis requer REDIS_URL configurado"]

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch(monkeypatch, BaseSettings(environment="production"))
        with pytest.raises(RuntimeError, match="API_BASE_URL é obrigatório"):
            bootstrap.validate_runtime_settings()


class TestInitializeApp:
    def test_sets_run_id(self) -> None:
        bootstrap.initialize_app("INFO")
        assert len(get_run_id()) == 12

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            bootstrap.initialize_app("TRACE")


class TestCreateDatabaseEngine:
    def test_invalid_settings_raise(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import config.settings

        monkeypatch.setattr(
            config.settings, "get_database_settings", lambda: DatabaseSettings(host="")
        )
        with pytest.raises(ValueError, match="DB_HOST não pode ser vazio"):
            bootstrap.create_database_engine()
