"""Results Aggregator - Estatísticas derivadas das tentativas."""

from ..models.enums import QuizStatus
from ..models.schemas import Attempt, Quiz
from .scoring_engine import QuizScoringEngine, round_half_up


def format_hours_minutes(seconds: int) -> str:
    """Formata segundos como `{h}h {m}m`."""
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"


class ResultsAggregator:
    """Cálculos de leitura sobre tentativas. Nada é armazenado ou cacheado.

    - Por aluno: quizzes concluídos, média percentual, tempo total
    - Por quiz: número de tentativas e média percentual
    - Por aluno e quiz: melhor tentativa e tentativa mais recente

    Empates mantém a primeira tentativa na ordem de inserção.
    """

    def __init__(self, scoring: QuizScoringEngine | None = None):
        self.scoring = scoring or QuizScoringEngine()

    def attempt_percentage(self, attempt: Attempt) -> float:
        return self.scoring.calculate_percentage(attempt.score, attempt.total_points)

    def average_percentage(self, attempts: list[Attempt]) -> float:
        """Média de score/total*100; tentativa com total 0 conta como 0%."""
        if not attempts:
            return 0.0
        return sum(self.attempt_percentage(a) for a in attempts) / len(attempts)

    def student_summary(self, attempts: list[Attempt]) -> dict:
        """Resumo de um aluno (recebe as tentativas desse aluno).

        Returns:
            Dict com completed_quizzes, average_percentage, average_score
            (arredondado), total_time_spent e time_spent_formatted
        """
        average = self.average_percentage(attempts)
        total_time = sum(a.time_spent for a in attempts)
        return {
            "completed_quizzes": len(attempts),
            "average_percentage": average,
            "average_score": round_half_up(average),
            "total_time_spent": total_time,
            "time_spent_formatted": format_hours_minutes(total_time),
        }

    def quiz_summary(self, attempts: list[Attempt], quiz_id: str) -> dict:
        """Resumo de um quiz (visão do professor)."""
        quiz_attempts = [a for a in attempts if a.quiz_id == quiz_id]
        average = self.average_percentage(quiz_attempts)
        return {
            "quiz_id": quiz_id,
            "attempts": len(quiz_attempts),
            "average_percentage": average,
            "average_score": round_half_up(average),
        }

    def teacher_summary(self, quizzes: list[Quiz], attempts: list[Attempt], teacher_id: str) -> dict:
        """Resumo do painel do professor (somente quizzes criados por ele)."""
        own = [q for q in quizzes if q.created_by == teacher_id]
        own_ids = {q.id for q in own}
        return {
            "total_quizzes": len(own),
            "published_quizzes": sum(1 for q in own if q.is_published),
            "total_attempts": sum(1 for a in attempts if a.quiz_id in own_ids),
            "quizzes": [self.quiz_summary(attempts, q.id) for q in own],
        }

    @staticmethod
    def _student_quiz_attempts(attempts: list[Attempt], student_id: str, quiz_id: str) -> list[Attempt]:
        return [a for a in attempts if a.student_id == student_id and a.quiz_id == quiz_id]

    def best_attempt(self, attempts: list[Attempt], student_id: str, quiz_id: str) -> Attempt | None:
        """Tentativa com maior razão score/total (empate: a primeira)."""
        best: Attempt | None = None
        for attempt in self._student_quiz_attempts(attempts, student_id, quiz_id):
            if best is None or self.attempt_percentage(attempt) > self.attempt_percentage(best):
                best = attempt
        return best

    def latest_attempt(self, attempts: list[Attempt], student_id: str, quiz_id: str) -> Attempt | None:
        """Tentativa com completed_at mais recente (empate: a primeira)."""
        latest: Attempt | None = None
        for attempt in self._student_quiz_attempts(attempts, student_id, quiz_id):
            if latest is None or attempt.completed_at > latest.completed_at:
                latest = attempt
        return latest

    def best_score(self, attempts: list[Attempt], student_id: str, quiz_id: str) -> int | None:
        """Melhor percentual arredondado, ou None sem tentativas."""
        best = self.best_attempt(attempts, student_id, quiz_id)
        return None if best is None else round_half_up(self.attempt_percentage(best))

    def quiz_status(self, attempts: list[Attempt], student_id: str, quiz_id: str) -> QuizStatus:
        if self._student_quiz_attempts(attempts, student_id, quiz_id):
            return QuizStatus.COMPLETED
        return QuizStatus.NOT_ATTEMPTED
