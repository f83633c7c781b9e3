"""Acesso direto ao PostgreSQL para os scripts de manutenção."""

from app.infra.database.engine import (
    build_database_url,
    create_db_engine,
    table_exists,
    test_connection,
)
from app.infra.database.migrations import (
    ALREADY_EXISTS_MARKERS,
    MigrationOutcome,
    discover_migrations,
    execute_sql_commands,
    execute_sql_file,
    is_already_exists_error,
    split_sql_commands,
)

__all__ = [
    "ALREADY_EXISTS_MARKERS",
    "MigrationOutcome",
    "build_database_url",
    "create_db_engine",
    "discover_migrations",
    "execute_sql_commands",
    "execute_sql_file",
    "is_already_exists_error",
    "split_sql_commands",
    "table_exists",
    "test_connection",
]
