"""Engine SQLAlchemy para os scripts de manutenção.

Scripts são execuções únicas: NullPool fecha a conexão física
assim que ela é devolvida.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from config.settings.database import DatabaseSettings

logger = logging.getLogger(__name__)

POSTGRES_DRIVER = "postgresql+psycopg2"


def build_database_url(settings: DatabaseSettings) -> URL:
    """Monta a URL de conexão; DATABASE_URL tem precedência."""
    if settings.url:
        url = make_url(settings.url)
        if url.drivername in ("postgres", "postgresql"):
            url = url.set(drivername=POSTGRES_DRIVER)
        return url

    return URL.create(
        POSTGRES_DRIVER,
        username=settings.user,
        password=settings.password or None,
        host=settings.host,
        port=settings.port,
        database=settings.name,
        query={"sslmode": "require"} if settings.ssl else {},
    )


def create_db_engine(
    settings: DatabaseSettings | None = None,
    *,
    url: str | URL | None = None,
) -> Engine:
    """Cria engine a partir de settings (ou URL explícita, usada em testes)."""
    if url is None:
        from config.settings import get_database_settings

        url = build_database_url(settings or get_database_settings())
    return create_engine(url, poolclass=NullPool)


def test_connection(engine: Engine) -> bool:
    """Abre uma conexão e consulta o horário do servidor.

    Returns:
        True se o banco respondeu; falhas são logadas, não propagadas.
    """
    try:
        with engine.connect() as conn:
            now = conn.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
    except SQLAlchemyError as exc:
        logger.error(
            "database_connection_failed",
            extra={"error_type": type(exc).__name__, "error_message": str(exc)},
        )
        return False

    logger.info("database_connected", extra={"server_time": str(now)})
    return True


# nome começa com test_: impede a coleta pelo pytest
test_connection.__test__ = False  # type: ignore[attr-defined]


def table_exists(conn: Connection, table_name: str) -> bool:
    return inspect(conn).has_table(table_name)
