"""Quiz Engines - Lógica de negócios."""

from .assembler import MAX_QUESTIONS, QuestionPoolAssembler
from .attempt_runner import AttemptRunner, CountdownTimer
from .classifier import ContentClassifier
from .generator import QuestionGenerator
from .results import ResultsAggregator, format_hours_minutes
from .scoring_engine import QuizScoringEngine, round_half_up
from .session_registry import SessionRegistry

__all__ = [
    "MAX_QUESTIONS",
    "AttemptRunner",
    "ContentClassifier",
    "CountdownTimer",
    "QuestionGenerator",
    "QuestionPoolAssembler",
    "QuizScoringEngine",
    "ResultsAggregator",
    "SessionRegistry",
    "format_hours_minutes",
    "round_half_up",
]
