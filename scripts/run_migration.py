#!/usr/bin/env python3
"""Executa um único arquivo de migração.

Com --split o arquivo é executado comando a comando (blocos `$$`
preservados) e cada "já existe" é ignorado isoladamente; sem ele,
o arquivo vai inteiro numa chamada.

Uso:
    python scripts/run_migration.py migrations/015_mercado_livre.sql --split \\
        --expect-table mercado_livre_accounts --expect-table product_images_ml
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from maintenance import EXIT_FAILURE, EXIT_OK, add_common_arguments, open_connection, start_run
from sqlalchemy.exc import SQLAlchemyError

from app.infra.database import (
    execute_sql_commands,
    execute_sql_file,
    table_exists,
    test_connection,
)
from utils.errors import MigrationError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger("scripts.run_migration")


def check_expected_tables(conn: Connection, tables: list[str]) -> list[str]:
    """Retorna as tabelas esperadas que não existem."""
    missing = [table for table in tables if not table_exists(conn, table)]
    for table in tables:
        print(f"   {'ok' if table not in missing else 'AUSENTE'}: {table}")
    return missing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", type=Path, help="Arquivo .sql a executar.")
    parser.add_argument(
        "--split",
        action="store_true",
        help="Executa comando a comando, tolerando objetos existentes.",
    )
    parser.add_argument(
        "--expect-table",
        action="append",
        default=[],
        metavar="TABLE",
        help="Tabela que deve existir após a migração (repetível).",
    )
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, engine: Engine | None = None) -> int:
    args = parse_args(argv)
    start_run(verbose=args.verbose)

    if not args.file.is_file():
        print(f"Arquivo SQL não encontrado: {args.file}")
        return EXIT_FAILURE

    try:
        with open_connection(engine) as conn:
            if not test_connection(conn.engine):
                print("Falha na conexão com o banco de dados.")
                return EXIT_FAILURE

            if args.split:
                counts = execute_sql_commands(conn, args.file, tolerate_existing=True)
                print(
                    f"{args.file.name}: {counts['executed']} comandos executados, "
                    f"{counts['skipped']} já existentes"
                )
            else:
                outcome = execute_sql_file(conn, args.file, tolerate_existing=True)
                print(f"{args.file.name}: {'executado' if outcome == 'executed' else 'já aplicado'}")

            missing: list[str] = []
            if args.expect_table:
                print("Verificando tabelas:")
                missing = check_expected_tables(conn, args.expect_table)
    except (MigrationError, SQLAlchemyError, ValueError) as exc:
        logger.error("migration_failed", extra={"file": args.file.name, "error_message": str(exc)})
        print(f"Erro na migração: {exc}")
        return EXIT_FAILURE

    if missing:
        print(f"Apenas {len(args.expect_table) - len(missing)}/{len(args.expect_table)} tabelas criadas.")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
