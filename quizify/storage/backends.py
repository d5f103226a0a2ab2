"""Storage Backends - Armazenamento chave-valor local e síncrono."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]+$")


class KeyValueStorage(Protocol):
    """Contrato mínimo de armazenamento (semântica de localStorage)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


def validate_key(key: str) -> str:
    """Valida a chave para evitar path traversal no backend de arquivos."""
    if not key or not _KEY_PATTERN.match(key):
        raise ValueError(f"Chave de armazenamento inválida: {key!r}")
    return key


class MemoryStorage:
    """Armazenamento em memória (efêmero, usado em testes)."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStorage:
    """Armazenamento durável: um arquivo `<key>.json` por chave.

    Escritas são atômicas (arquivo temporário + rename), então um processo
    interrompido nunca deixa um blob pela metade.

    Args:
        directory: Diretório dos arquivos (criado se não existir)
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{validate_key(key)}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Blob gravado: {path}")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self.directory.glob(f"*{self.SUFFIX}"))
