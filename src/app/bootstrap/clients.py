"""Factories de clientes externos: Redis e SQLAlchemy."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from redis import Redis
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_redis_client() -> Redis[bytes]:
    """Cria cliente Redis síncrono (singleton).

    Returns:
        Cliente Redis configurado

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    import redis

    from config.settings import get_base_settings

    redis_url = get_base_settings().redis_url
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: Redis[bytes] = redis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("redis_client_created", extra={"host": host})
    return client


def create_database_engine() -> Engine:
    """Cria engine do PostgreSQL a partir de DB_* / DATABASE_URL.

    Raises:
        ValueError: Se as settings do banco forem inválidas
    """
    from app.infra.database import create_db_engine
    from config.settings import get_database_settings

    settings = get_database_settings()
    errors = settings.validate()
    if errors:
        raise ValueError("; ".join(errors))

    engine = create_db_engine(settings)
    logger.info("database_engine_created", extra={"target": settings.display_target})
    return engine
