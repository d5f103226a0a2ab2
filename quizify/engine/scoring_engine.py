"""Quiz Scoring Engine - Motor de pontuação e faixas de desempenho."""

import math
from typing import Any

from ..models.enums import PerformanceGrade
from ..models.schemas import Attempt, Question, Quiz


def round_half_up(value: float) -> int:
    """Arredonda percentuais com .5 sempre para cima (12.5 -> 13)."""
    return math.floor(value + 0.5)


class QuizScoringEngine:
    """Motor de pontuação para quizzes.

    Somente questões de múltipla escolha e verdadeiro/falso são corrigidas
    automaticamente: a resposta registrada precisa ser exatamente o índice
    correto (mesmo tipo e valor). Questões de resposta curta dependem de
    revisão manual e nunca contribuem para a pontuação.

    Faixas de desempenho:
        - >= 90%: Excelente
        - >= 80%: Muito bom
        - >= 70%: Bom
        - >= 60%: Regular
        - < 60%: Precisa melhorar

    Example:
        >>> engine = QuizScoringEngine()
        >>> grade, message = engine.calculate_grade(85.0)
        >>> grade
        <PerformanceGrade.GREAT: 'great'>
    """

    # Faixas (threshold, grade, message)
    GRADE_THRESHOLDS = [
        (90, PerformanceGrade.EXCELLENT, "Excellent work! Outstanding performance!"),
        (80, PerformanceGrade.GREAT, "Great job! You did very well!"),
        (70, PerformanceGrade.GOOD, "Good work! Room for improvement."),
        (60, PerformanceGrade.FAIR, "Fair performance. Consider reviewing the material."),
        (0, PerformanceGrade.NEEDS_IMPROVEMENT, "Needs improvement. Please review and try again."),
    ]

    def is_correct(self, question: Question, answer: Any) -> bool | None:
        """Verifica se a resposta está correta.

        Args:
            question: Questão respondida
            answer: Valor registrado (None quando não respondida)

        Returns:
            True/False para questões corrigíveis, None para resposta curta
        """
        if not question.auto_graded:
            return None
        # bool é subclasse de int: True nunca equivale ao índice 1
        return type(answer) is int and answer == question.correct_answer

    def points_for(self, question: Question, answer: Any) -> int:
        """Pontos obtidos em uma questão (0 ou a pontuação cheia)."""
        return question.points if self.is_correct(question, answer) else 0

    def calculate_score(self, questions: list[Question], answers: dict[str, Any]) -> int:
        """Soma os pontos das questões corrigíveis respondidas corretamente.

        Args:
            questions: Questões do quiz
            answers: Respostas registradas (question_id -> valor)

        Returns:
            Pontuação inteira
        """
        return sum(self.points_for(q, answers.get(q.id)) for q in questions)

    def calculate_percentage(self, score: int, total_points: int) -> float:
        """Percentual de aproveitamento; quiz sem pontos conta como 0%."""
        if total_points <= 0:
            return 0.0
        return score / total_points * 100

    def calculate_grade(self, percentage: float) -> tuple[PerformanceGrade, str]:
        """Calcula a faixa de desempenho.

        Args:
            percentage: Percentual de acerto (0-100)

        Returns:
            Tuple de (grade, message)
        """
        for threshold, grade, message in self.GRADE_THRESHOLDS:
            if percentage >= threshold:
                return grade, message

        return self.GRADE_THRESHOLDS[-1][1], self.GRADE_THRESHOLDS[-1][2]

    def evaluate_answer(self, question: Question, answer: Any) -> dict:
        """Avalia uma resposta individual (usado na revisão do resultado).

        Returns:
            Dict com submitted, is_correct, points_earned, correct_answer, explanation
        """
        return {
            "question_id": question.id,
            "question": question.question,
            "type": question.type,
            "submitted": answer,
            "correct_answer": question.correct_answer,
            "is_correct": self.is_correct(question, answer),
            "points_earned": self.points_for(question, answer),
            "points": question.points,
            "explanation": question.explanation,
        }

    def review_attempt(self, quiz: Quiz, attempt: Attempt) -> list[dict]:
        """Revisão questão a questão de uma tentativa, na ordem do quiz."""
        return [self.evaluate_answer(q, attempt.answers.get(q.id)) for q in quiz.questions]

    @staticmethod
    def format_duration(seconds: int) -> str:
        """Formata segundos como `m:ss`."""
        return f"{seconds // 60}:{seconds % 60:02d}"
