"""Fixtures dos scripts de manutenção: SQLite em arquivo."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from sqlalchemy.engine import Engine

from app.infra.database import create_db_engine


class Db:
    """Atalhos para preparar e conferir o banco dos testes."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def run(self, *statements: str) -> None:
        with self.engine.connect() as conn:
            for statement in statements:
                conn.exec_driver_sql(statement)
            conn.commit()

    def rows(self, sql: str) -> list[tuple[Any, ...]]:
        with self.engine.connect() as conn:
            return [tuple(row) for row in conn.exec_driver_sql(sql)]


@pytest.fixture
def engine(tmp_path: Path) -> Engine:
    # NullPool: banco em memória seria recriado a cada conexão
    return create_db_engine(url=f"sqlite:///{tmp_path / 'loja.db'}")


@pytest.fixture
def db(engine: Engine) -> Db:
    return Db(engine)


@pytest.fixture
def migrations_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "migrations"
    directory.mkdir()
    return directory
