"""Testes dos token stores (memória, arquivo e Redis com mock)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.infra.stores.file_token_store import FileTokenStore
from app.infra.stores.memory_token_store import MemoryTokenStore
from app.infra.stores.redis_token_store import TOKEN_PREFIX, RedisTokenStore
from utils.errors import TokenStoreError


class TestMemoryTokenStore:
    """Testes do MemoryTokenStore."""

    def test_set_get_delete(self) -> None:
        store = MemoryTokenStore()
        assert store.get("auth_token") is None
        store.set("auth_token", "abc")
        assert store.get("auth_token") == "abc"
        store.delete("auth_token")
        assert store.get("auth_token") is None

    def test_delete_missing_key_is_noop(self) -> None:
        MemoryTokenStore().delete("inexistente")

    def test_initial_values_are_copied(self) -> None:
        initial = {"auth_token": "x"}
        store = MemoryTokenStore(initial)
        store.set("auth_token", "y")
        assert initial["auth_token"] == "x"


class TestFileTokenStore:
    """Testes do FileTokenStore."""

    def test_persists_between_instances(self, tmp_path: Path) -> None:
        """Outra instância no mesmo arquivo enxerga o token gravado."""
        path = tmp_path / "nested" / "auth.json"
        FileTokenStore(path).set("auth_token", "abc")
        assert FileTokenStore(path).get("auth_token") == "abc"
        assert json.loads(path.read_text(encoding="utf-8")) == {"auth_token": "abc"}

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert FileTokenStore(tmp_path / "auth.json").get("auth_token") is None

    def test_corrupted_file_is_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "auth.json"
        path.write_text("{not json", encoding="utf-8")
        store = FileTokenStore(path)
        assert store.get("auth_token") is None
        store.set("auth_token", "novo")
        assert store.get("auth_token") == "novo"

    def test_delete_keeps_other_keys(self, tmp_path: Path) -> None:
        store = FileTokenStore(tmp_path / "auth.json")
        store.set("auth_token", "a")
        store.set("admin_token", "b")
        store.delete("auth_token")
        assert store.get("auth_token") is None
        assert store.get("admin_token") == "b"

    def test_unreadable_path_raises(self, tmp_path: Path) -> None:
        """Diretório no lugar do arquivo gera TokenStoreError."""
        directory = tmp_path / "auth.json"
        directory.mkdir()
        with pytest.raises(TokenStoreError):
            FileTokenStore(directory).get("auth_token")

    def test_failed_write_removes_temp_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Falha no os.replace não deixa `.token-*` para trás."""

        def fail_replace(src: str, dst: object) -> None:
            raise OSError("disco cheio")

        monkeypatch.setattr("os.replace", fail_replace)
        store = FileTokenStore(tmp_path / "auth.json")
        with pytest.raises(TokenStoreError):
            store.set("auth_token", "abc")
        assert list(tmp_path.glob(".token-*")) == []
        assert not (tmp_path / "auth.json").exists()


class TestRedisTokenStore:
    """Testes do RedisTokenStore com mock."""

    def test_set_uses_prefixed_key(self) -> None:
        mock_redis = MagicMock()
        RedisTokenStore(mock_redis).set("auth_token", "abc")
        mock_redis.set.assert_called_once_with(f"{TOKEN_PREFIX}auth_token", "abc")

    def test_get_decodes_bytes(self) -> None:
        mock_redis = MagicMock()
        mock_redis.get.return_value = b"abc"
        assert RedisTokenStore(mock_redis).get("auth_token") == "abc"
        mock_redis.get.assert_called_once_with("storefront:auth_token")

    def test_get_missing_returns_none(self) -> None:
        mock_redis = MagicMock()
        mock_redis.get.return_value = None
        assert RedisTokenStore(mock_redis).get("auth_token") is None

    def test_delete(self) -> None:
        mock_redis = MagicMock()
        RedisTokenStore(mock_redis).delete("auth_token")
        mock_redis.delete.assert_called_once_with("storefront:auth_token")

    @pytest.mark.parametrize("operation", ["get", "set", "delete"])
    def test_redis_errors_become_token_store_error(self, operation: str) -> None:
        mock_redis = MagicMock()
        getattr(mock_redis, operation).side_effect = RedisConnectionError("down")
        store = RedisTokenStore(mock_redis)
        args = ("auth_token", "abc") if operation == "set" else ("auth_token",)
        with pytest.raises(TokenStoreError) as exc_info:
            getattr(store, operation)(*args)
        assert isinstance(exc_info.value.__cause__, RedisConnectionError)
