"""
Quizify Server - Geração e aplicação de quizzes a partir de material de curso

FastAPI server with:
- Quiz authoring (documento -> questões sugeridas -> quiz)
- Sessões de resolução com cronômetro
- Resultados para aluno e professor
- Persistência local em JSON
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quizify.auth import AuthService
from quizify.config import QuizifyConfig, StorageBackend, configure_logging
from quizify.engine import QuestionGenerator, SessionRegistry
from quizify.ingest import DocumentIngestor
from quizify.router import router as quiz_router
from quizify.storage import JsonFileStorage, MemoryStorage, QuizStore

logger = logging.getLogger(__name__)


# =============================================================================
# APP FACTORY
# =============================================================================


def build_store(config: QuizifyConfig) -> QuizStore:
    """Cria o store no backend configurado e carrega os dados persistidos."""
    if config.storage_backend == StorageBackend.MEMORY:
        storage = MemoryStorage()
    else:
        storage = JsonFileStorage(config.data_dir)

    store = QuizStore(storage)
    store.load()
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle: descarta sessões abertas (e seus cronômetros) no shutdown."""
    logger.info(
        f"Quizify iniciado: storage={app.state.config.storage_backend.value}, "
        f"quizzes={len(app.state.store.quizzes)}"
    )
    yield

    discarded = app.state.sessions.discard_all()
    if discarded:
        logger.info(f"{discarded} sessões abertas descartadas no shutdown")


def create_app(config: QuizifyConfig | None = None) -> FastAPI:
    """Monta a aplicação com store, auth e registro de sessões em `app.state`."""
    config = config or QuizifyConfig.from_env()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Quizify",
        description="Geração de quizzes a partir de material de curso",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.store = build_store(config)
    app.state.auth = AuthService()
    app.state.generator = QuestionGenerator(
        ingestor=DocumentIngestor(max_bytes=config.max_upload_bytes)
    )
    app.state.sessions = SessionRegistry(idle_timeout=config.session_idle_minutes * 60)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "X-User-Id"],
    )

    app.include_router(quiz_router)

    @app.get("/")
    async def root():
        """Health check."""
        return {
            "status": "ok",
            "quizzes": len(app.state.store.quizzes),
            "active_sessions": len(app.state.sessions),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
