#!/usr/bin/env python3
"""Habilita a extensão UNACCENT (busca de produtos sem acentos).

Sem permissão para criar a extensão o script só avisa: a busca
continua funcionando, mas sensível a acentos.

Uso:
    python scripts/enable_unaccent.py
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from maintenance import EXIT_FAILURE, EXIT_OK, add_common_arguments, open_connection, start_run
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.infra.database import test_connection

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.enable_unaccent")

PERMISSION_HINT = (
    "Execute como superusuário do PostgreSQL:\n"
    '   sudo -u postgres psql -d <banco> -c "CREATE EXTENSION unaccent;"'
)


def is_unaccent_enabled(conn: Connection) -> bool:
    return bool(
        conn.execute(
            text("SELECT EXISTS(SELECT 1 FROM pg_extension WHERE extname = 'unaccent')")
        ).scalar()
    )


def enable_unaccent(conn: Connection) -> bool:
    """Cria a extensão e confere se 'suspensao' casa com 'suspensão'."""
    conn.execute(text("CREATE EXTENSION IF NOT EXISTS unaccent"))
    conn.commit()
    return bool(
        conn.execute(text("SELECT UNACCENT('suspensao') = UNACCENT('suspensão')")).scalar()
    )


def is_permission_error(exc: BaseException) -> bool:
    return "permission denied" in str(exc).lower()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)

    try:
        with open_connection(engine) as conn:
            if not test_connection(conn.engine):
                print("Falha na conexão com o banco de dados.")
                return EXIT_FAILURE

            if is_unaccent_enabled(conn):
                print("Extensão UNACCENT já está habilitada.")
                return EXIT_OK

            try:
                matched = enable_unaccent(conn)
            except SQLAlchemyError as exc:
                conn.rollback()
                logger.warning("unaccent_unavailable", extra={"error_message": str(exc)})
                print(f"Não foi possível habilitar UNACCENT: {exc}")
                if is_permission_error(exc):
                    print(PERMISSION_HINT)
                print("A busca continua funcionando, mas sensível a acentos.")
                return EXIT_OK
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("enable_unaccent_failed", extra={"error_message": str(exc)})
        print(f"Erro: {exc}")
        return EXIT_FAILURE

    if matched:
        print("UNACCENT habilitada: busca insensível a acentos funcionando.")
    else:
        print("UNACCENT habilitada, mas o autoteste falhou.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
