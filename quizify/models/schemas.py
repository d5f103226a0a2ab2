"""Quiz Schemas - Modelos Pydantic de domínio e request/response."""

import secrets
import string
from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    computed_field,
    field_validator,
    model_validator,
)

from .enums import AttemptStatus, PerformanceGrade, QuestionKind, QuizDifficulty, UserRole

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9

TRUE_FALSE_OPTIONS = ["True", "False"]

# Resposta submetida: índice (mcq/true-false) ou texto (short-answer).
# Strict para que "1" ou True nunca sejam convertidos em 1.
AnswerValue = Union[StrictInt, StrictStr]


def generate_id() -> str:
    """Gera ID aleatório base-36 de 9 caracteres.

    Colisões são improváveis mas não impossíveis (escopo de um único cliente).
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# QUESTÕES (variante com tag `type`)
# =============================================================================


class _QuestionBase(BaseModel):
    """Campos comuns a todos os tipos de questão."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=generate_id, description="ID opaco da questão")
    question: str = Field(..., description="Enunciado da questão")
    points: int = Field(..., gt=0, description="Pontos atribuidos (inteiro positivo)")
    explanation: str | None = Field(default=None, description="Explicação da resposta")

    @property
    def auto_graded(self) -> bool:
        return False


class MultipleChoiceQuestion(_QuestionBase):
    """Questão de múltipla escolha com índice da alternativa correta."""

    type: Literal["mcq"] = "mcq"
    options: list[str] = Field(..., min_length=2, description="Alternativas (>= 2)")
    correct_answer: StrictInt = Field(..., ge=0, description="Índice da alternativa correta")

    @model_validator(mode="after")
    def _check_answer_in_bounds(self) -> "MultipleChoiceQuestion":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer ({self.correct_answer}) fora do intervalo de "
                f"{len(self.options)} alternativas"
            )
        return self

    @property
    def auto_graded(self) -> bool:
        return True


class TrueFalseQuestion(_QuestionBase):
    """Questão verdadeiro/falso. Alternativas fixas ["True", "False"]."""

    type: Literal["true-false"] = "true-false"
    options: list[str] = Field(default_factory=lambda: list(TRUE_FALSE_OPTIONS))
    correct_answer: StrictInt = Field(..., ge=0, le=1, description="0 = True, 1 = False")

    @field_validator("options")
    @classmethod
    def _fixed_options(cls, v: list[str]) -> list[str]:
        if v != TRUE_FALSE_OPTIONS:
            raise ValueError('true-false exige exatamente as alternativas ["True", "False"]')
        return v

    @property
    def auto_graded(self) -> bool:
        return True


class ShortAnswerQuestion(_QuestionBase):
    """Questão de resposta curta. Referência textual, sem correção automática."""

    type: Literal["short-answer"] = "short-answer"
    correct_answer: str = Field(default="", description="Resposta de referência")


Question = Annotated[
    Union[MultipleChoiceQuestion, TrueFalseQuestion, ShortAnswerQuestion],
    Field(discriminator="type"),
]

QuestionList = TypeAdapter(list[Question])


class PublicQuestion(BaseModel):
    """Questão como exibida ao aluno (sem gabarito)."""

    id: str
    type: QuestionKind
    question: str
    options: list[str] | None = None
    points: int

    @classmethod
    def from_question(cls, question: "Question") -> "PublicQuestion":
        return cls(
            id=question.id,
            type=question.type,
            question=question.question,
            options=getattr(question, "options", None),
            points=question.points,
        )


# =============================================================================
# QUIZ, TENTATIVA E USUÁRIO
# =============================================================================


class Quiz(BaseModel):
    """Quiz publicado/rascunho de um professor.

    `total_points` é sempre derivado da sequência de questões; valores
    persistidos para esse campo são ignorados no carregamento.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=generate_id)
    title: str
    description: str
    questions: list[Question] = Field(default_factory=list)
    created_by: str
    created_at: datetime = Field(default_factory=utc_now)
    time_limit: int | None = Field(default=None, gt=0, description="Limite em minutos")
    subject: str | None = None
    difficulty: QuizDifficulty = QuizDifficulty.MEDIUM
    is_published: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_points(self) -> int:
        return sum(q.points for q in self.questions)

    def get_question(self, question_id: str) -> "Question | None":
        return next((q for q in self.questions if q.id == question_id), None)


class Attempt(BaseModel):
    """Tentativa concluída de um aluno. Imutável após a submissão."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(default_factory=generate_id)
    quiz_id: str
    student_id: str
    answers: dict[str, Any] = Field(default_factory=dict)
    score: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    completed_at: datetime = Field(default_factory=utc_now)
    time_spent: int = Field(..., ge=0, description="Duração em segundos")


class User(BaseModel):
    """Usuário fornecido pelo colaborador de autenticação."""

    id: str = Field(default_factory=generate_id)
    email: str
    name: str
    role: UserRole


# =============================================================================
# PAYLOADS DE CRIAÇÃO / ATUALIZAÇÃO
# =============================================================================


class QuizCreate(BaseModel):
    """Dados para criação de quiz (id, created_at e total_points são atribuidos)."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Título obrigatório")
    description: str = Field(..., description="Descrição obrigatória")
    questions: list[Question] = Field(..., min_length=1)
    created_by: str
    time_limit: int | None = Field(default=None, gt=0)
    subject: str | None = None
    difficulty: QuizDifficulty = QuizDifficulty.MEDIUM
    is_published: bool = False

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("campo obrigatório não pode ser vazio")
        return v

    @field_validator("questions")
    @classmethod
    def _questions_filled(cls, v: list) -> list:
        for q in v:
            if not q.question.strip():
                raise ValueError(f"questão {q.id} sem enunciado")
            for opt in getattr(q, "options", None) or []:
                if not opt.strip():
                    raise ValueError(f"questão {q.id} possui alternativa vazia")
        return v


class QuizUpdate(BaseModel):
    """Atualização parcial de quiz. Apenas campos enviados são aplicados."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    questions: list[Question] | None = Field(default=None, min_length=1)
    time_limit: int | None = Field(default=None, gt=0)
    subject: str | None = None
    difficulty: QuizDifficulty | None = None
    is_published: bool | None = None

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("campo obrigatório não pode ser vazio")
        return v


class AttemptCreate(BaseModel):
    """Tentativa finalizada, antes de receber id e completed_at."""

    quiz_id: str
    student_id: str
    answers: dict[str, Any] = Field(default_factory=dict)
    score: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    time_spent: int = Field(..., ge=0)


# =============================================================================
# REQUEST / RESPONSE (HTTP)
# =============================================================================


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str
    role: UserRole = UserRole.STUDENT


class LoginRequest(BaseModel):
    email: str
    password: str


class GenerateFromTextRequest(BaseModel):
    """Request para gerar questões a partir de texto já extraído."""

    text: str = Field(..., description="Texto extraído do documento")


class GenerateQuizResponse(BaseModel):
    """Response com o pool de questões sugeridas."""

    questions: list[Question]
    topics: list[str] = Field(default_factory=list, description="Tópicos detectados")
    total_points: int


class StartSessionRequest(BaseModel):
    quiz_id: str


class AnswerRequest(BaseModel):
    question_id: str
    value: AnswerValue


class GoToRequest(BaseModel):
    index: int


class SessionResponse(BaseModel):
    """Estado corrente de uma sessão de resolução."""

    session_id: str
    quiz_id: str
    status: AttemptStatus
    current_index: int
    total_questions: int
    answered: int
    answers: dict[str, Any]
    time_left: int | None
    can_advance: bool
    current_question: PublicQuestion | None


class QuestionReview(BaseModel):
    """Revisão de uma questão após a submissão."""

    question_id: str
    question: str
    type: QuestionKind
    submitted: Any = None
    correct_answer: AnswerValue
    is_correct: bool | None = Field(None, description="None para short-answer")
    points_earned: int
    points: int
    explanation: str | None = None


class AttemptResultResponse(BaseModel):
    """Resultado final de uma tentativa."""

    attempt: Attempt
    percentage: int
    grade: PerformanceGrade
    message: str
    time_spent_formatted: str
    review: list[QuestionReview] = Field(default_factory=list)


class StudentSummaryResponse(BaseModel):
    completed_quizzes: int
    average_score: int
    total_time_spent: int
    time_spent_formatted: str
    available_quizzes: int
    quizzes: list[dict] = Field(default_factory=list)


class QuizSummaryResponse(BaseModel):
    quiz_id: str
    attempts: int
    average_score: int


class TeacherSummaryResponse(BaseModel):
    total_quizzes: int
    published_quizzes: int
    total_attempts: int
    quizzes: list[QuizSummaryResponse] = Field(default_factory=list)

