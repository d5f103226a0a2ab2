"""Quizify - Geração e aplicação de quizzes a partir de material de curso.

Arquitetura:
- models/: Enums, Schemas Pydantic, AttemptState
- templates/: Banco de questões por tópico e texto de exemplo
- engine/: ContentClassifier, QuestionPoolAssembler, QuizScoringEngine,
  AttemptRunner, ResultsAggregator, QuestionGenerator
- ingest/: Validação de documentos e extração de texto
- storage/: QuizStore sobre armazenamento chave-valor (memória ou JSON)
- auth.py: Autenticação simulada
- router.py: FastAPI endpoints
"""

from .auth import AuthService
from .engine import (
    AttemptRunner,
    ContentClassifier,
    QuestionGenerator,
    QuestionPoolAssembler,
    QuizScoringEngine,
    ResultsAggregator,
)
from .models import Attempt, AttemptState, Question, Quiz, User
from .storage import QuizStore

__all__ = [
    # Models
    "Attempt",
    "AttemptState",
    "Question",
    "Quiz",
    "User",
    # Engines
    "AttemptRunner",
    "ContentClassifier",
    "QuestionGenerator",
    "QuestionPoolAssembler",
    "QuizScoringEngine",
    "ResultsAggregator",
    # Storage
    "QuizStore",
    # Auth
    "AuthService",
]
