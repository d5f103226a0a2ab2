"""Quiz Templates - Banco de questões modelo."""

from .question_bank import (
    FILLER_QUESTIONS,
    SAMPLE_COURSE_TEXT,
    TOPIC_DETECTION_KEYWORDS,
    TOPIC_KEYWORDS,
    TOPIC_QUESTIONS,
)

__all__ = [
    "FILLER_QUESTIONS",
    "SAMPLE_COURSE_TEXT",
    "TOPIC_DETECTION_KEYWORDS",
    "TOPIC_KEYWORDS",
    "TOPIC_QUESTIONS",
]
