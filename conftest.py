# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Fixtures para testes unitários sem I/O externo (storage em memória)
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env(tmp_path: Path):
    """Configura variáveis de ambiente para testes."""
    env_vars = {
        "QUIZIFY_STORAGE": "memory",
        "QUIZIFY_DATA_DIR": str(tmp_path / ".quizify"),
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars):
        yield


@pytest.fixture
def clean_env():
    """Limpa variáveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield


# =============================================================================
# FIXTURES DE STORAGE
# =============================================================================


@pytest.fixture
def memory_storage():
    """Backend chave-valor em memória."""
    from quizify.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    """QuizStore vazio sobre storage em memória."""
    from quizify.storage import QuizStore

    quiz_store = QuizStore(memory_storage)
    quiz_store.load()
    return quiz_store


# =============================================================================
# FIXTURES DE DOMÍNIO
# =============================================================================


@pytest.fixture
def sample_questions() -> list[dict]:
    """Três questões: mcq (2 pts), true-false (1 pt), short-answer (3 pts)."""
    return [
        {
            "id": "q-mcq",
            "type": "mcq",
            "question": "Which data structure follows LIFO?",
            "options": ["Queue", "Array", "Stack", "Linked List"],
            "correct_answer": 2,
            "points": 2,
            "explanation": "A stack is LIFO.",
        },
        {
            "id": "q-tf",
            "type": "true-false",
            "question": "A queue follows LIFO.",
            "options": ["True", "False"],
            "correct_answer": 1,
            "points": 1,
        },
        {
            "id": "q-short",
            "type": "short-answer",
            "question": "Explain a stack.",
            "correct_answer": "LIFO collection",
            "points": 3,
        },
    ]


@pytest.fixture
def quiz_payload(sample_questions) -> dict:
    """Payload válido para QuizStore.create_quiz."""
    return {
        "title": "Data Structures",
        "description": "Stacks and queues",
        "questions": sample_questions,
        "created_by": "teacher-1",
        "is_published": True,
    }


@pytest.fixture
def sample_quiz(store, quiz_payload):
    """Quiz persistido no store de teste (total 6 pontos)."""
    return store.create_quiz(quiz_payload)


@pytest.fixture
def timed_quiz(store, sample_questions):
    """Quiz com limite de 2 minutos (apenas mcq e true-false)."""
    return store.create_quiz(
        {
            "title": "Timed",
            "description": "Quiz com limite de tempo",
            "questions": sample_questions[:2],
            "created_by": "teacher-1",
            "time_limit": 2,
            "is_published": True,
        }
    )


class FakeClock:
    """Relógio controlável para o AttemptRunner."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def app():
    """Aplicação isolada com storage em memória."""
    from quizify.config import QuizifyConfig, StorageBackend
    from server import create_app

    return create_app(QuizifyConfig(storage_backend=StorageBackend.MEMORY, log_level="WARNING"))


@pytest.fixture
def client(app):
    """Cliente de teste FastAPI (lifespan ativo durante o teste)."""
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client
