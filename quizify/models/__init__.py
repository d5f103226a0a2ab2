"""Quiz Models - Enums, Schemas e State."""

from .enums import (
    AttemptStatus,
    PerformanceGrade,
    QuestionKind,
    QuizDifficulty,
    QuizStatus,
    UserRole,
)
from .schemas import (
    AnswerRequest,
    AnswerValue,
    Attempt,
    AttemptCreate,
    AttemptResultResponse,
    GenerateFromTextRequest,
    GenerateQuizResponse,
    GoToRequest,
    LoginRequest,
    MultipleChoiceQuestion,
    PublicQuestion,
    Question,
    QuestionList,
    QuestionReview,
    Quiz,
    QuizCreate,
    QuizSummaryResponse,
    QuizUpdate,
    RegisterRequest,
    SessionResponse,
    ShortAnswerQuestion,
    StartSessionRequest,
    StudentSummaryResponse,
    TeacherSummaryResponse,
    TrueFalseQuestion,
    User,
    generate_id,
)
from .state import AttemptState

__all__ = [
    # Enums
    "AttemptStatus",
    "PerformanceGrade",
    "QuestionKind",
    "QuizDifficulty",
    "QuizStatus",
    "UserRole",
    # Domínio
    "AnswerValue",
    "Attempt",
    "AttemptCreate",
    "MultipleChoiceQuestion",
    "PublicQuestion",
    "Question",
    "QuestionList",
    "Quiz",
    "QuizCreate",
    "QuizUpdate",
    "ShortAnswerQuestion",
    "TrueFalseQuestion",
    "User",
    "generate_id",
    # Request/Response
    "AnswerRequest",
    "AttemptResultResponse",
    "GenerateFromTextRequest",
    "GenerateQuizResponse",
    "GoToRequest",
    "LoginRequest",
    "QuestionReview",
    "QuizSummaryResponse",
    "RegisterRequest",
    "SessionResponse",
    "StartSessionRequest",
    "StudentSummaryResponse",
    "TeacherSummaryResponse",
    # State
    "AttemptState",
]
