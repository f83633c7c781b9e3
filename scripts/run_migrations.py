#!/usr/bin/env python3
"""Executa todas as migrações SQL em ordem de nome.

Objetos que já existem são ignorados: o script pode ser reexecutado
com segurança sobre um banco já configurado.

Uso:
    python scripts/run_migrations.py
    python scripts/run_migrations.py --migrations-dir server/migrations
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from maintenance import (
    DEFAULT_MIGRATIONS_DIR,
    EXIT_FAILURE,
    EXIT_OK,
    add_common_arguments,
    open_connection,
    start_run,
)
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.infra.database import (
    discover_migrations,
    execute_sql_file,
    table_exists,
    test_connection,
)
from utils.errors import MigrationError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.run_migrations")

SUMMARY_TABLES = (
    ("users", "Usuários"),
    ("categories", "Categorias"),
    ("products", "Produtos"),
    ("orders", "Pedidos"),
)


@dataclass(frozen=True)
class MigrationRunStats:
    executed: int = 0
    skipped: int = 0


def run_all(conn: Connection, files: list[Path]) -> MigrationRunStats:
    executed = skipped = 0
    for index, path in enumerate(files, start=1):
        print(f"[{index}/{len(files)}] {path.name}")
        outcome = execute_sql_file(conn, path, tolerate_existing=True)
        if outcome == "executed":
            executed += 1
        else:
            skipped += 1
            print(f"    {path.name}: objetos já existem, pulando")
    return MigrationRunStats(executed=executed, skipped=skipped)


def database_summary(conn: Connection) -> dict[str, int | None]:
    """Contagem de linhas das tabelas principais (None se não existir)."""
    summary: dict[str, int | None] = {}
    for table, _label in SUMMARY_TABLES:
        if not table_exists(conn, table):
            summary[table] = None
            continue
        summary[table] = conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()
    return summary


def find_admin_user(conn: Connection) -> dict[str, Any] | None:
    if not table_exists(conn, "users"):
        return None
    row = conn.execute(
        text("SELECT name, email, role, status FROM users WHERE role = 'admin' LIMIT 1")
    ).mappings().first()
    return dict(row) if row else None


def print_report(summary: dict[str, int | None], admin: dict[str, Any] | None) -> None:
    print("\nResumo do banco de dados:")
    for table, label in SUMMARY_TABLES:
        count = summary.get(table)
        print(f"   {label}: {'tabela ausente' if count is None else count}")

    if admin:
        print("\nUsuário administrador configurado:")
        print(f"   Nome: {admin['name']}")
        print(f"   Email: {admin['email']}")
        print(f"   Status: {admin['status']}")
        print("Altere a senha padrão do administrador após o primeiro login.")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--migrations-dir",
        type=Path,
        default=DEFAULT_MIGRATIONS_DIR,
        help="Diretório com os arquivos .sql (padrão: %(default)s).",
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)

    if not args.migrations_dir.is_dir():
        print(f"Diretório de migrações não encontrado: {args.migrations_dir}")
        return EXIT_FAILURE

    files = discover_migrations(args.migrations_dir)
    print(f"Encontradas {len(files)} migrações:")
    for index, path in enumerate(files, start=1):
        print(f"   {index}. {path.name}")

    try:
        with open_connection(engine) as conn:
            if not test_connection(conn.engine):
                print("Falha na conexão. Verifique se o PostgreSQL está rodando e o .env.")
                return EXIT_FAILURE

            if table_exists(conn, "users"):
                print("Tabelas já existem: objetos existentes serão ignorados.")
            else:
                print("Banco de dados vazio: executando configuração inicial.")

            stats = run_all(conn, files)
            logger.info(
                "migrations_finished",
                extra={"executed": stats.executed, "skipped": stats.skipped},
            )
            print_report(database_summary(conn), find_admin_user(conn))
    except (MigrationError, SQLAlchemyError, ValueError) as exc:
        logger.error("migrations_failed", extra={"error_message": str(exc)})
        print(f"Erro ao executar migrações: {exc}")
        print("Execute as migrações uma por vez (run_migration.py) para isolar o problema.")
        return EXIT_FAILURE

    print("\nTodas as migrações foram executadas.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
