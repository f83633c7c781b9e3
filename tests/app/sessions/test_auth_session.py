"""Testes da AuthSession."""

from __future__ import annotations

from app.infra.stores.memory_token_store import MemoryTokenStore
from app.sessions.auth_session import AuthSession
from config.settings import DEFAULT_AUTH_TOKEN_KEY


class TestAuthSession:
    """Ciclo de vida do token e leitura do store."""

    def test_loads_existing_token_on_creation(self) -> None:
        store = MemoryTokenStore({DEFAULT_AUTH_TOKEN_KEY: "persistido"})
        session = AuthSession(store)
        assert session.cached_token == "persistido"
        assert session.current_token() == "persistido"

    def test_set_token_writes_store(self) -> None:
        store = MemoryTokenStore()
        session = AuthSession(store)
        session.set_token("abc")
        assert store.get(DEFAULT_AUTH_TOKEN_KEY) == "abc"
        assert session.authorization_header() == {"Authorization": "Bearer abc"}

    def test_remove_token_clears_store(self) -> None:
        store = MemoryTokenStore()
        session = AuthSession(store)
        session.set_token("abc")
        session.remove_token()
        assert store.get(DEFAULT_AUTH_TOKEN_KEY) is None
        assert session.authorization_header() == {}

    def test_sees_token_written_by_other_session(self) -> None:
        """Duas sessões no mesmo store compartilham o token."""
        store = MemoryTokenStore()
        first = AuthSession(store)
        second = AuthSession(store)
        first.set_token("compartilhado")
        assert second.current_token() == "compartilhado"
        first.remove_token()
        assert second.authorization_header() == {}

    def test_custom_key(self) -> None:
        store = MemoryTokenStore()
        session = AuthSession(store, key="admin_token")
        session.set_token("x")
        assert store.get("admin_token") == "x"
        assert store.get(DEFAULT_AUTH_TOKEN_KEY) is None
