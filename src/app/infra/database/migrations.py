"""Execução de arquivos SQL de migração.

Migrações são reexecutáveis: "já existe" pode ser tolerado e
registrado como aviso em vez de abortar o script.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from sqlalchemy.exc import DBAPIError

from config.logging import log_tolerated_error
from utils.errors import MigrationError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)

MigrationOutcome = Literal["executed", "skipped"]

ALREADY_EXISTS_MARKERS = (
    "already exists",
    "já existe",
    "duplicate key",
    "duplicate_object",
)

_DOLLAR_TAG = re.compile(r"\$[A-Za-z0-9_]*\$")
_NO_PARAMETERS = {"no_parameters": True}


def is_already_exists_error(exc: BaseException) -> bool:
    """True se o erro indica objeto já criado (tabela, índice, tipo, linha)."""
    message = str(getattr(exc, "orig", None) or exc)
    return any(marker in message for marker in ALREADY_EXISTS_MARKERS)


def split_sql_commands(sql: str) -> list[str]:
    """Divide um script em comandos, respeitando blocos `$$`/`$tag$`.

    Linhas vazias e comentários `--` são descartados. Um comando termina
    na linha que contém `;` fora de bloco dollar-quoted.
    """
    commands: list[str] = []
    current: list[str] = []
    open_tag: str | None = None

    for line in sql.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--"):
            continue
        current.append(line)

        for tag in _DOLLAR_TAG.findall(line):
            if open_tag is None:
                open_tag = tag
            elif tag == open_tag:
                open_tag = None

        if ";" in line and open_tag is None:
            commands.append("\n".join(current).strip())
            current = []

    tail = "\n".join(current).strip()
    if tail:
        commands.append(tail)
    return commands


def _run(
    conn: Connection,
    sql: str,
    label: str,
    *,
    tolerate_existing: bool,
) -> MigrationOutcome:
    try:
        conn.exec_driver_sql(sql, execution_options=_NO_PARAMETERS)
        conn.commit()
    except DBAPIError as exc:
        conn.rollback()
        if tolerate_existing and is_already_exists_error(exc):
            log_tolerated_error(logger, label, "already_exists", str(exc.orig))
            return "skipped"
        raise MigrationError(label, str(exc.orig)) from exc
    return "executed"


def execute_sql_file(
    conn: Connection,
    path: Path,
    *,
    tolerate_existing: bool = False,
) -> MigrationOutcome:
    """Executa o arquivo inteiro numa única chamada ao banco.

    Raises:
        MigrationError: Falha do banco não tolerada.
    """
    sql = path.read_text(encoding="utf-8")
    outcome = _run(conn, sql, path.name, tolerate_existing=tolerate_existing)
    if outcome == "executed":
        logger.info("migration_executed", extra={"migration": path.name})
    return outcome


def execute_sql_commands(
    conn: Connection,
    path: Path,
    *,
    tolerate_existing: bool = True,
) -> dict[MigrationOutcome, int]:
    """Executa o arquivo comando a comando.

    Cada comando é confirmado isoladamente, então um "já existe"
    não desfaz os comandos anteriores.

    Returns:
        Contagem de comandos executados e ignorados.
    """
    commands = split_sql_commands(path.read_text(encoding="utf-8"))
    counts: dict[MigrationOutcome, int] = {"executed": 0, "skipped": 0}
    for index, command in enumerate(commands, start=1):
        label = f"{path.name}#{index}/{len(commands)}"
        counts[_run(conn, command, label, tolerate_existing=tolerate_existing)] += 1
    logger.info("migration_executed", extra={"migration": path.name, **counts})
    return counts


def discover_migrations(directory: Path) -> list[Path]:
    """Arquivos .sql do diretório em ordem de nome (README ignorado)."""
    return sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file()
            and path.suffix == ".sql"
            and not path.stem.upper().startswith("README")
        ),
        key=lambda path: path.name,
    )
