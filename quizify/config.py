# =============================================================================
# CONFIGURAÇÃO DO QUIZIFY
# =============================================================================

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class StorageBackend(str, Enum):
    """Backends de armazenamento local."""

    FILE = "file"
    MEMORY = "memory"


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


@dataclass
class QuizifyConfig:
    """Configuração centralizada, carregada de variáveis de ambiente.

    Attributes:
        data_dir: Diretório dos blobs persistidos (backend `file`)
        storage_backend: `file` (durável) ou `memory` (efêmero)
        max_upload_mb: Tamanho máximo do documento enviado
        log_level: Nível de log da aplicação
        cors_origins: Origens liberadas para o frontend
        session_idle_minutes: Minutos sem acesso até descartar sessão sem limite de tempo
    """

    data_dir: Path = Path(".quizify")
    storage_backend: StorageBackend = StorageBackend.FILE
    max_upload_mb: int = 10
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    session_idle_minutes: int = 120

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "QuizifyConfig":
        """Cria configuração a partir das variáveis de ambiente.

        Variáveis:
            QUIZIFY_DATA_DIR, QUIZIFY_STORAGE, QUIZIFY_MAX_UPLOAD_MB,
            LOG_LEVEL, QUIZIFY_CORS_ORIGINS (lista separada por vírgula),
            QUIZIFY_SESSION_IDLE_MINUTES
        """
        backend_name = os.getenv("QUIZIFY_STORAGE", StorageBackend.FILE.value).lower()
        try:
            backend = StorageBackend(backend_name)
        except ValueError:
            logging.getLogger(__name__).warning(
                "QUIZIFY_STORAGE inválido '%s', usando 'file'", backend_name
            )
            backend = StorageBackend.FILE

        cors = os.getenv("QUIZIFY_CORS_ORIGINS")

        return cls(
            data_dir=Path(os.getenv("QUIZIFY_DATA_DIR", ".quizify")),
            storage_backend=backend,
            max_upload_mb=int(os.getenv("QUIZIFY_MAX_UPLOAD_MB", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_csv(cors) if cors else list(DEFAULT_CORS_ORIGINS),
            session_idle_minutes=int(os.getenv("QUIZIFY_SESSION_IDLE_MINUTES", "120")),
        )


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Configura logging da aplicação (stdout, formato único).

    Args:
        level: Nível como int ou string (ex.: logging.INFO ou "INFO").

    Returns:
        Logger raiz do pacote `quizify`.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger("quizify")
