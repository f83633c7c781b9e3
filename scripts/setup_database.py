#!/usr/bin/env python3
"""Configura o banco executando todas as migrações (modo estrito).

Diferente de run_migrations.py, qualquer erro interrompe a execução.
Com --reset, remove antes as tabelas e funções conhecidas.

Uso:
    python scripts/setup_database.py
    python scripts/setup_database.py --reset --yes
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from maintenance import (
    DEFAULT_MIGRATIONS_DIR,
    EXIT_FAILURE,
    EXIT_OK,
    add_common_arguments,
    open_connection,
    start_run,
)
from sqlalchemy.exc import SQLAlchemyError

from app.infra.database import discover_migrations, execute_sql_file, test_connection
from utils.errors import MigrationError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.setup_database")

# Ordem respeita as dependências entre tabelas
RESET_TABLES = (
    "stock_history",
    "cart_items",
    "cart_sessions",
    "order_items",
    "orders",
    "products",
    "categories",
    "users",
)
RESET_FUNCTIONS = (
    "update_updated_at_column",
    "generate_order_number",
    "set_order_number",
    "update_product_stock",
)


def reset_statements() -> list[str]:
    statements = [f"DROP TABLE IF EXISTS {table} CASCADE" for table in RESET_TABLES]
    statements.extend(f"DROP FUNCTION IF EXISTS {name}() CASCADE" for name in RESET_FUNCTIONS)
    return statements


def reset_database(conn: Connection) -> None:
    """Remove tabelas e funções da aplicação numa única transação."""
    for statement in reset_statements():
        conn.exec_driver_sql(statement)
    conn.commit()
    logger.warning("database_reset", extra={"tables": len(RESET_TABLES)})


def setup_database(conn: Connection, migrations_dir: Path) -> int:
    """Executa as migrações sem tolerar objetos existentes.

    Returns:
        Quantidade de arquivos executados.
    """
    files = discover_migrations(migrations_dir)
    for path in files:
        print(f"Executando: {path.name}")
        execute_sql_file(conn, path, tolerate_existing=False)
    return len(files)


def confirm_reset() -> bool:
    answer = input("Isto apaga TODOS os dados da loja. Digite 'sim' para continuar: ")
    return answer.strip().lower() == "sim"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Remove tabelas e funções antes de configurar.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Não pede confirmação para --reset.",
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

    if args.reset and not args.yes and not confirm_reset():
        print("Reset cancelado.")
        return EXIT_FAILURE

    try:
        with open_connection(engine) as conn:
            if not test_connection(conn.engine):
                print("Falha na conexão com o banco de dados.")
                return EXIT_FAILURE
            if args.reset:
                print("Removendo tabelas e funções existentes...")
                reset_database(conn)
            count = setup_database(conn, args.migrations_dir)
    except (MigrationError, SQLAlchemyError, ValueError) as exc:
        logger.error("database_setup_failed", extra={"error_message": str(exc)})
        print(f"Erro durante a configuração: {exc}")
        return EXIT_FAILURE

    print(f"Banco configurado: {count} migrações executadas.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
