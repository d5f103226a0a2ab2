"""Quiz Store - Persistência de quizzes e tentativas em armazenamento local."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from ..models.schemas import Attempt, AttemptCreate, Quiz, QuizCreate, QuizUpdate
from .backends import KeyValueStorage

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class QuizStore:
    """Coleções de quizzes e tentativas em memória, espelhadas no storage.

    Cada escrita persiste a coleção inteira. Blobs corrompidos no
    carregamento são descartados e a coleção começa vazia.

    Estrutura de chaves:
        - quizify_quizzes -> Array JSON de Quiz
        - quizify_attempts -> Array JSON de Attempt

    Example:
        >>> store = QuizStore(JsonFileStorage(".quizify"))
        >>> store.load()
        >>> quiz = store.create_quiz(payload)
        >>> store.get_quiz_by_id(quiz.id) is not None
        True
    """

    QUIZZES_KEY = "quizify_quizzes"
    ATTEMPTS_KEY = "quizify_attempts"

    def __init__(self, storage: KeyValueStorage):
        """Inicializa store com um backend chave-valor.

        Args:
            storage: Backend síncrono (JsonFileStorage, MemoryStorage)
        """
        self.storage = storage
        self._quizzes: list[Quiz] = []
        self._attempts: list[Attempt] = []

    # -------------------------------------------------------------------------
    # Carregamento / persistência
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """Carrega as duas coleções do storage."""
        self._quizzes = self._load_collection(self.QUIZZES_KEY, Quiz)
        self._attempts = self._load_collection(self.ATTEMPTS_KEY, Attempt)
        logger.info(
            f"Store carregado: {len(self._quizzes)} quizzes, {len(self._attempts)} tentativas"
        )

    def _load_collection(self, key: str, model: type[ModelT]) -> list[ModelT]:
        raw = self.storage.get(key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"esperado array JSON, recebido {type(data).__name__}")
            return [model.model_validate(item) for item in data]
        except (ValueError, TypeError) as e:
            # json.JSONDecodeError e pydantic.ValidationError são ValueError
            logger.warning(f"Dados corrompidos em '{key}', descartando: {e}")
            self.storage.delete(key)
            return []

    def _persist(self, key: str, items: list[BaseModel]) -> None:
        payload = json.dumps([item.model_dump(mode="json") for item in items])
        self.storage.set(key, payload)

    def _persist_quizzes(self) -> None:
        self._persist(self.QUIZZES_KEY, self._quizzes)

    def _persist_attempts(self) -> None:
        self._persist(self.ATTEMPTS_KEY, self._attempts)

    # -------------------------------------------------------------------------
    # Quizzes
    # -------------------------------------------------------------------------

    @property
    def quizzes(self) -> list[Quiz]:
        return list(self._quizzes)

    def create_quiz(self, data: QuizCreate | dict[str, Any]) -> Quiz:
        """Cria quiz com ID e data de criação novos.

        Args:
            data: Campos do quiz (validados; título/descrição/questões obrigatórios)

        Returns:
            Quiz criado, com total_points derivado das questões
        """
        payload = data if isinstance(data, QuizCreate) else QuizCreate.model_validate(data)
        quiz = Quiz.model_validate(payload.model_dump())

        self._quizzes.append(quiz)
        self._persist_quizzes()
        logger.info(f"Quiz criado: {quiz.id} ({len(quiz.questions)} questões)")
        return quiz

    def update_quiz(self, quiz_id: str, partial: QuizUpdate | dict[str, Any]) -> Quiz | None:
        """Aplica atualização parcial. Sem efeito se o quiz não existir.

        Returns:
            Quiz atualizado, ou None se não encontrado
        """
        changes_model = partial if isinstance(partial, QuizUpdate) else QuizUpdate.model_validate(partial)
        changes = changes_model.model_dump(exclude_unset=True)

        for index, quiz in enumerate(self._quizzes):
            if quiz.id == quiz_id:
                updated = Quiz.model_validate({**quiz.model_dump(), **changes})
                self._quizzes[index] = updated
                self._persist_quizzes()
                logger.debug(f"Quiz atualizado: {quiz_id} campos={sorted(changes)}")
                return updated

        logger.debug(f"Quiz não encontrado para update: {quiz_id}")
        self._persist_quizzes()
        return None

    def delete_quiz(self, quiz_id: str) -> None:
        """Remove o quiz. Tentativas que o referenciam são mantidas."""
        before = len(self._quizzes)
        self._quizzes = [q for q in self._quizzes if q.id != quiz_id]
        self._persist_quizzes()
        if len(self._quizzes) < before:
            logger.info(f"Quiz deletado: {quiz_id}")

    def get_quiz_by_id(self, quiz_id: str) -> Quiz | None:
        return next((q for q in self._quizzes if q.id == quiz_id), None)

    def list_quizzes(
        self, created_by: str | None = None, published_only: bool = False
    ) -> list[Quiz]:
        """Lista quizzes, opcionalmente filtrando por autor e publicação."""
        return [
            q
            for q in self._quizzes
            if (created_by is None or q.created_by == created_by)
            and (not published_only or q.is_published)
        ]

    # -------------------------------------------------------------------------
    # Tentativas
    # -------------------------------------------------------------------------

    @property
    def attempts(self) -> list[Attempt]:
        return list(self._attempts)

    def submit_attempt(self, data: AttemptCreate | dict[str, Any]) -> Attempt:
        """Grava tentativa com ID e data de conclusão novos."""
        payload = data if isinstance(data, AttemptCreate) else AttemptCreate.model_validate(data)
        attempt = Attempt.model_validate(payload.model_dump())

        self._attempts.append(attempt)
        self._persist_attempts()
        logger.info(f"Tentativa gravada: {attempt.id} (quiz {attempt.quiz_id})")
        return attempt

    def get_attempt_by_id(self, attempt_id: str) -> Attempt | None:
        return next((a for a in self._attempts if a.id == attempt_id), None)

    def get_user_attempts(self, student_id: str) -> list[Attempt]:
        return [a for a in self._attempts if a.student_id == student_id]

    def get_quiz_attempts(self, quiz_id: str) -> list[Attempt]:
        return [a for a in self._attempts if a.quiz_id == quiz_id]
