"""Settings de conexão direta ao PostgreSQL.

Usadas apenas pelos scripts de manutenção (migrações, seeds, correções).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class DatabaseSettings:
    """Configurações do banco de dados.

    Attributes:
        host: Host do PostgreSQL (DB_HOST)
        port: Porta do PostgreSQL (DB_PORT)
        name: Nome do banco (DB_NAME)
        user: Usuário (DB_USER)
        password: Senha (DB_PASSWORD)
        ssl: Exige SSL na conexão (DB_SSL=true)
        url: URL completa; quando definida, substitui os campos acima (DATABASE_URL)
    """

    host: str = "localhost"
    port: int = 5432
    name: str = "skina_ecopecas"
    user: str = "postgres"
    password: str = ""
    ssl: bool = False
    url: str = ""

    @property
    def display_target(self) -> str:
        """Destino da conexão sem credenciais, seguro para logs."""
        if self.url:
            return self.url.rsplit("@", 1)[-1]
        return f"{self.host}:{self.port}/{self.name}"

    def validate(self) -> list[str]:
        """Valida configurações do banco."""
        errors: list[str] = []
        if self.url:
            return errors
        if not self.host:
            errors.append("DB_HOST não pode ser vazio")
        if not 0 < self.port < 65536:
            errors.append(f"DB_PORT inválida: {self.port}")
        if not self.name:
            errors.append("DB_NAME não pode ser vazio")
        if not self.user:
            errors.append("DB_USER não pode ser vazio")
        return errors


def _load_database_from_env() -> DatabaseSettings:
    """Carrega DatabaseSettings de variáveis de ambiente."""
    return DatabaseSettings(
        host=os.getenv("DB_HOST", "localhost"),
        port=int(os.getenv("DB_PORT", "5432")),
        name=os.getenv("DB_NAME", "skina_ecopecas"),
        user=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD", ""),
        ssl=os.getenv("DB_SSL", "").lower() == "true",
        url=os.getenv("DATABASE_URL", ""),
    )


@lru_cache(maxsize=1)
def get_database_settings() -> DatabaseSettings:
    """Retorna instância cacheada de DatabaseSettings."""
    return _load_database_from_env()
