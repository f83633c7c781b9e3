"""Configuração do pytest para o projeto skina-ecopecas."""

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent

# Adiciona src/ e scripts/ ao PYTHONPATH para permitir imports absolutos
for path in (ROOT / "src", ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """configure_logging substitui handlers do root; restaura após cada teste."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
