"""Quiz Enums - Tipos de questão, dificuldade, papéis e estados."""

from enum import Enum


class QuestionKind(str, Enum):
    """Tipos de questão suportados."""

    MCQ = "mcq"  # Múltipla escolha (índice)
    TRUE_FALSE = "true-false"  # Verdadeiro/Falso (índice 0/1)
    SHORT_ANSWER = "short-answer"  # Texto livre, correção manual


class QuizDifficulty(str, Enum):
    """Níveis de dificuldade do quiz."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class UserRole(str, Enum):
    """Papéis de usuário (gating das telas de professor/aluno)."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttemptStatus(str, Enum):
    """Estados de uma sessão de resolução de quiz."""

    IN_PROGRESS = "in_progress"
    SUBMITTING = "submitting"
    COMPLETED = "completed"


class QuizStatus(str, Enum):
    """Situação de um quiz para um aluno."""

    NOT_ATTEMPTED = "not-attempted"
    COMPLETED = "completed"


class PerformanceGrade(str, Enum):
    """Faixas de desempenho exibidas no resultado."""

    EXCELLENT = "excellent"  # >= 90%
    GREAT = "great"  # 80-89%
    GOOD = "good"  # 70-79%
    FAIR = "fair"  # 60-69%
    NEEDS_IMPROVEMENT = "needs_improvement"  # < 60%
