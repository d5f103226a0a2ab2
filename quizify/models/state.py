"""Attempt State - Estado em memória de uma sessão de resolução."""

from dataclasses import dataclass, field
from typing import Any

from .enums import AttemptStatus


@dataclass
class AttemptState:
    """Estado completo de uma sessão de quiz em andamento.

    Attributes:
        quiz_id: ID do quiz sendo resolvido
        student_id: ID do aluno
        total_questions: Número de questões do quiz
        status: in_progress -> submitting -> completed
        current_index: Questão exibida (0-based)
        answers: Respostas registradas (question_id -> valor)
        started_at: Instante de início (relógio do runner), capturado uma única vez
        time_left: Segundos restantes (None quando o quiz não tem limite)
    """

    quiz_id: str
    student_id: str
    total_questions: int
    started_at: float
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    current_index: int = 0
    answers: dict[str, Any] = field(default_factory=dict)
    time_left: int | None = None

    @property
    def is_active(self) -> bool:
        return self.status == AttemptStatus.IN_PROGRESS

    @property
    def is_last_question(self) -> bool:
        return self.current_index >= self.total_questions - 1

    def record_answer(self, question_id: str, value: Any) -> None:
        """Registra (ou sobrescreve) a resposta de uma questão."""
        self.answers[question_id] = value

    def has_answer(self, question_id: str) -> bool:
        return question_id in self.answers

    def move_to(self, index: int) -> int:
        """Move o índice corrente, limitado a [0, total_questions - 1]."""
        upper = max(self.total_questions - 1, 0)
        self.current_index = min(max(index, 0), upper)
        return self.current_index
