"""Testes do engine SQLAlchemy dos scripts."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.pool import NullPool

from app.infra.database import build_database_url, create_db_engine, engine as db_engine, table_exists
from config.settings import DatabaseSettings


class TestBuildDatabaseUrl:
    def test_from_fields(self) -> None:
        url = build_database_url(
            DatabaseSettings(host="db", port=5433, name="loja", user="app", password="s3nha")
        )
        assert url.drivername == "postgresql+psycopg2"
        assert url.host == "db"
        assert url.port == 5433
        assert url.database == "loja"
        assert url.password == "s3nha"
        assert "sslmode" not in url.query

    def test_ssl_required(self) -> None:
        url = build_database_url(DatabaseSettings(ssl=True))
        assert url.query["sslmode"] == "require"

    def test_empty_password_is_omitted(self) -> None:
        assert build_database_url(DatabaseSettings()).password is None

    def test_database_url_takes_precedence(self) -> None:
        url = build_database_url(
            DatabaseSettings(host="ignorado", url="postgres://u:p@render.com:5432/loja")
        )
        assert url.drivername == "postgresql+psycopg2"
        assert url.host == "render.com"


class TestEngine:
    def test_uses_null_pool(self, tmp_path: Path) -> None:
        engine = create_db_engine(url=f"sqlite:///{tmp_path / 'x.db'}")
        assert isinstance(engine.pool, NullPool)

    def test_connection_ok(self, tmp_path: Path) -> None:
        engine = create_db_engine(url=f"sqlite:///{tmp_path / 'x.db'}")
        assert db_engine.test_connection(engine) is True

    def test_connection_failure_returns_false(self, tmp_path: Path) -> None:
        engine = create_db_engine(url=f"sqlite:///{tmp_path / 'ausente' / 'x.db'}")
        assert db_engine.test_connection(engine) is False

    def test_table_exists(self, tmp_path: Path) -> None:
        engine = create_db_engine(url=f"sqlite:///{tmp_path / 'x.db'}")
        with engine.connect() as conn:
            assert not table_exists(conn, "products")
            conn.exec_driver_sql("CREATE TABLE products (id INTEGER)")
            conn.commit()
            assert table_exists(conn, "products")
