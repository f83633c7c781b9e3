"""Infra comum dos scripts de manutenção do banco.

Uso (dentro de um script):
    from maintenance import open_connection, start_run

    start_run()
    with open_connection() as conn:
        ...
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from app.bootstrap import create_database_engine, initialize_app

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

DEFAULT_MIGRATIONS_DIR = Path(os.getenv("MIGRATIONS_DIR", "migrations"))

EXIT_OK = 0
EXIT_FAILURE = 1


def start_run(*, verbose: bool = False) -> None:
    """Configura logging JSON com um run_id novo para esta execução."""
    initialize_app("DEBUG" if verbose else None)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Logs em nível DEBUG.",
    )


@contextmanager
def open_connection(engine: Engine | None = None) -> Iterator[Connection]:
    """Conexão única da execução, sempre liberada ao final.

    Args:
        engine: Engine já criado (testes). Se None, cria a partir do
            ambiente e descarta ao final.
    """
    owned = engine is None
    engine = engine or create_database_engine()
    conn = engine.connect()
    try:
        yield conn
    finally:
        conn.close()
        if owned:
            engine.dispose()
