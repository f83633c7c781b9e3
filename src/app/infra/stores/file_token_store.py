"""File Token Store: token persistido em arquivo JSON local.

O arquivo é relido a cada `get`, então processos diferentes na mesma
máquina enxergam o último token gravado por qualquer um deles.
Gravação atômica via arquivo temporário + os.replace.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from app.protocols.token_store import TokenStoreProtocol
from utils.errors import TokenStoreError

logger = logging.getLogger(__name__)


class FileTokenStore(TokenStoreProtocol):
    """Token store baseado em arquivo JSON (chave -> token).

    Args:
        path: Caminho do arquivo. Diretórios são criados sob demanda.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise TokenStoreError(f"Falha ao ler token store: {self._path}") from exc

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            logger.warning("token_store_corrupted", extra={"path": str(self._path)})
            return {}

        if not isinstance(data, dict):
            logger.warning("token_store_corrupted", extra={"path": str(self._path)})
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".token-")
        except OSError as exc:
            raise TokenStoreError(f"Falha ao gravar token store: {self._path}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise TokenStoreError(f"Falha ao gravar token store: {self._path}") from exc

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)
