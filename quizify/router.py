"""Quizify Router - Endpoints FastAPI."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, Header, HTTPException, Request, UploadFile
from pydantic import ValidationError as PydanticValidationError

from .auth import AuthService
from .engine.attempt_runner import AttemptRunner
from .engine.generator import QuestionGenerator
from .engine.results import ResultsAggregator
from .engine.scoring_engine import QuizScoringEngine, round_half_up
from .engine.session_registry import SessionRegistry
from .exceptions import (
    AuthenticationError,
    DocumentProcessingError,
    PermissionDeniedError,
    QuizifyError,
    ValidationError,
)
from .ingest import DocumentUpload
from .models.enums import UserRole
from .models.schemas import (
    AnswerRequest,
    Attempt,
    AttemptResultResponse,
    GenerateFromTextRequest,
    GenerateQuizResponse,
    GoToRequest,
    LoginRequest,
    PublicQuestion,
    Question,
    QuestionReview,
    Quiz,
    QuizCreate,
    QuizSummaryResponse,
    QuizUpdate,
    RegisterRequest,
    SessionResponse,
    StartSessionRequest,
    StudentSummaryResponse,
    TeacherSummaryResponse,
    User,
)
from .storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_store(request: Request) -> QuizStore:
    return request.app.state.store


def get_auth(request: Request) -> AuthService:
    return request.app.state.auth


def get_generator(request: Request) -> QuestionGenerator:
    return request.app.state.generator


def get_sessions(request: Request) -> SessionRegistry:
    """Registro de sessões ativas (session_id -> runner)."""
    return request.app.state.sessions


def get_scoring_engine() -> QuizScoringEngine:
    return QuizScoringEngine()


def get_results_aggregator() -> ResultsAggregator:
    return ResultsAggregator()


def to_http_error(exc: QuizifyError) -> HTTPException:
    """Converte exceção de domínio em HTTPException."""
    if isinstance(exc, AuthenticationError):
        status_code = 401
    elif isinstance(exc, PermissionDeniedError):
        status_code = 403
    elif isinstance(exc, ValidationError):
        status_code = 400
    elif isinstance(exc, DocumentProcessingError):
        status_code = 422
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=exc.message)


def _validation_detail(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]


def get_current_user(
    x_user_id: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth),
) -> User:
    """Resolve o usuário pelo header `X-User-Id`."""
    try:
        return auth.require_user(x_user_id)
    except QuizifyError as e:
        raise to_http_error(e) from e


def require_teacher(user: User = Depends(get_current_user)) -> User:
    if user.role != UserRole.TEACHER:
        raise HTTPException(status_code=403, detail="Teacher role required")
    return user


def require_student(user: User = Depends(get_current_user)) -> User:
    if user.role != UserRole.STUDENT:
        raise HTTPException(status_code=403, detail="Student role required")
    return user


# =============================================================================
# HELPERS
# =============================================================================


def _get_quiz_or_404(store: QuizStore, quiz_id: str) -> Quiz:
    quiz = store.get_quiz_by_id(quiz_id)
    if quiz is None:
        raise HTTPException(status_code=404, detail=f"Quiz {quiz_id} not found")
    return quiz


def _get_own_quiz(store: QuizStore, quiz_id: str, teacher: User) -> Quiz:
    quiz = _get_quiz_or_404(store, quiz_id)
    if quiz.created_by != teacher.id:
        raise HTTPException(status_code=403, detail="Quiz belongs to another teacher")
    return quiz


def _student_view(quiz: Quiz) -> dict[str, Any]:
    """Quiz sem gabarito, como exibido ao aluno."""
    data = quiz.model_dump(mode="json", exclude={"questions"})
    data["questions"] = [PublicQuestion.from_question(q).model_dump() for q in quiz.questions]
    return data


def _session_response(session_id: str, runner: AttemptRunner) -> SessionResponse:
    question = runner.current_question
    answers = runner.answers
    return SessionResponse(
        session_id=session_id,
        quiz_id=runner.quiz.id,
        status=runner.status,
        current_index=runner.current_index,
        total_questions=len(runner.quiz.questions),
        answered=len(answers),
        answers=answers,
        time_left=runner.time_left,
        can_advance=runner.can_advance,
        current_question=PublicQuestion.from_question(question) if question else None,
    )


def _get_session(
    sessions: SessionRegistry, session_id: str, student: User
) -> AttemptRunner:
    runner = sessions.get(session_id)
    if runner is None or runner.state.student_id != student.id:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return runner


def _attempt_result(
    attempt: Attempt, quiz: Quiz | None, scoring: QuizScoringEngine
) -> AttemptResultResponse:
    """Resultado com faixa de desempenho e revisão (vazia se o quiz foi removido)."""
    percentage = scoring.calculate_percentage(attempt.score, attempt.total_points)
    grade, message = scoring.calculate_grade(percentage)
    review = scoring.review_attempt(quiz, attempt) if quiz else []
    return AttemptResultResponse(
        attempt=attempt,
        percentage=round_half_up(percentage),
        grade=grade,
        message=message,
        time_spent_formatted=scoring.format_duration(attempt.time_spent),
        review=[QuestionReview(**item) for item in review],
    )


def _generate_response(questions: list[Question], topics: list[str]) -> GenerateQuizResponse:
    return GenerateQuizResponse(
        questions=questions,
        topics=topics,
        total_points=sum(q.points for q in questions),
    )


# =============================================================================
# AUTH
# =============================================================================


@router.post("/auth/register", response_model=User, status_code=201)
async def register(body: RegisterRequest, auth: AuthService = Depends(get_auth)):
    """Cadastra usuário (professor ou aluno) e já o autentica."""
    try:
        return auth.register(body.email, body.password, body.name, body.role)
    except QuizifyError as e:
        raise to_http_error(e) from e


@router.post("/auth/login", response_model=User)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth)):
    """Login simulado: basta existir usuário com o e-mail."""
    try:
        return auth.login(body.email, body.password)
    except QuizifyError as e:
        raise to_http_error(e) from e


@router.post("/auth/logout")
async def logout(
    user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth),
):
    auth.logout(user.id)
    return {"status": "logged_out", "user_id": user.id}


# =============================================================================
# GERAÇÃO DE QUESTÕES
# =============================================================================


@router.post("/generate", response_model=GenerateQuizResponse)
async def generate_from_document(
    file: UploadFile = File(...),
    _teacher: User = Depends(require_teacher),
    generator: QuestionGenerator = Depends(get_generator),
):
    """Gera questões sugeridas a partir de um PDF enviado.

    - Aceita apenas `application/pdf` dentro do limite configurado
    - Retorna no máximo 12 questões embaralhadas e os tópicos detectados
    """
    upload = DocumentUpload(
        filename=file.filename or "document.pdf",
        content_type=file.content_type or "",
        data=await file.read(),
    )
    try:
        questions, topics = generator.generate_from_document(upload)
    except QuizifyError as e:
        raise to_http_error(e) from e

    return _generate_response(questions, topics)


@router.post("/generate/text", response_model=GenerateQuizResponse)
async def generate_from_text(
    body: GenerateFromTextRequest,
    _teacher: User = Depends(require_teacher),
    generator: QuestionGenerator = Depends(get_generator),
):
    """Gera questões sugeridas a partir de texto já extraído."""
    questions = generator.generate_from_text(body.text)
    topics = generator.classifier.detect_topics(body.text)
    return _generate_response(questions, topics)


# =============================================================================
# QUIZZES
# =============================================================================


@router.post("/quizzes", response_model=Quiz, status_code=201)
async def create_quiz(
    payload: dict[str, Any] = Body(...),
    teacher: User = Depends(require_teacher),
    store: QuizStore = Depends(get_store),
):
    """Cria quiz do professor autenticado (autor definido pelo servidor)."""
    try:
        data = QuizCreate.model_validate({**payload, "created_by": teacher.id})
    except PydanticValidationError as e:
        raise HTTPException(status_code=422, detail=_validation_detail(e)) from e

    return store.create_quiz(data)


@router.get("/quizzes")
async def list_quizzes(
    user: User = Depends(get_current_user),
    store: QuizStore = Depends(get_store),
):
    """Professor: seus quizzes. Aluno: quizzes publicados, sem gabarito."""
    if user.role == UserRole.TEACHER:
        quizzes = store.list_quizzes(created_by=user.id)
        return {"count": len(quizzes), "quizzes": [q.model_dump(mode="json") for q in quizzes]}

    quizzes = store.list_quizzes(published_only=True)
    return {"count": len(quizzes), "quizzes": [_student_view(q) for q in quizzes]}


@router.get("/quizzes/{quiz_id}")
async def get_quiz(
    quiz_id: str,
    user: User = Depends(get_current_user),
    store: QuizStore = Depends(get_store),
):
    if user.role == UserRole.TEACHER:
        return _get_own_quiz(store, quiz_id, user).model_dump(mode="json")

    quiz = _get_quiz_or_404(store, quiz_id)
    if not quiz.is_published:
        raise HTTPException(status_code=404, detail=f"Quiz {quiz_id} not found")
    return _student_view(quiz)


@router.patch("/quizzes/{quiz_id}", response_model=Quiz)
async def update_quiz(
    quiz_id: str,
    changes: QuizUpdate,
    teacher: User = Depends(require_teacher),
    store: QuizStore = Depends(get_store),
):
    """Atualização parcial (total_points é recalculado a partir das questões)."""
    _get_own_quiz(store, quiz_id, teacher)
    try:
        updated = store.update_quiz(quiz_id, changes)
    except PydanticValidationError as e:
        raise HTTPException(status_code=422, detail=_validation_detail(e)) from e

    if updated is None:
        raise HTTPException(status_code=404, detail=f"Quiz {quiz_id} not found")
    return updated


@router.delete("/quizzes/{quiz_id}")
async def delete_quiz(
    quiz_id: str,
    teacher: User = Depends(require_teacher),
    store: QuizStore = Depends(get_store),
):
    """Remove o quiz. Tentativas existentes são mantidas."""
    _get_own_quiz(store, quiz_id, teacher)
    store.delete_quiz(quiz_id)
    return {"status": "deleted", "quiz_id": quiz_id}


# =============================================================================
# SESSÕES DE RESOLUÇÃO
# =============================================================================


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def start_session(
    body: StartSessionRequest,
    student: User = Depends(require_student),
    store: QuizStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Inicia sessão de um quiz publicado (cronômetro se houver limite)."""
    quiz = _get_quiz_or_404(store, body.quiz_id)
    if not quiz.is_published:
        raise HTTPException(status_code=404, detail=f"Quiz {body.quiz_id} not found")

    session_id, runner = sessions.open(quiz, student.id, store, scoring=scoring)
    runner.start_timer()
    logger.info(f"[Quiz {quiz.id}] Sessão {session_id} iniciada por {student.id}")
    return _session_response(session_id, runner)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    return _session_response(session_id, _get_session(sessions, session_id, student))


@router.post("/sessions/{session_id}/answer", response_model=SessionResponse)
async def answer_question(
    session_id: str,
    body: AnswerRequest,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Registra (ou sobrescreve) a resposta de uma questão."""
    runner = _get_session(sessions, session_id, student)
    if runner.quiz.get_question(body.question_id) is None:
        raise HTTPException(status_code=404, detail=f"Question {body.question_id} not found")

    runner.answer(body.question_id, body.value)
    return _session_response(session_id, runner)


@router.post("/sessions/{session_id}/advance", response_model=SessionResponse)
async def advance(
    session_id: str,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Avança uma questão (exige resposta na questão atual)."""
    runner = _get_session(sessions, session_id, student)
    if not runner.can_advance:
        raise HTTPException(status_code=400, detail="Answer the current question before advancing")

    runner.advance()
    return _session_response(session_id, runner)


@router.post("/sessions/{session_id}/retreat", response_model=SessionResponse)
async def retreat(
    session_id: str,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    runner = _get_session(sessions, session_id, student)
    runner.retreat()
    return _session_response(session_id, runner)


@router.post("/sessions/{session_id}/goto", response_model=SessionResponse)
async def go_to_question(
    session_id: str,
    body: GoToRequest,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Salto pela grade de navegação (índice limitado ao intervalo válido)."""
    runner = _get_session(sessions, session_id, student)
    runner.go_to(body.index)
    return _session_response(session_id, runner)


@router.post("/sessions/{session_id}/submit", response_model=AttemptResultResponse)
async def submit_session(
    session_id: str,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Finaliza a sessão e grava a tentativa.

    Se o cronômetro já submeteu automaticamente, retorna a tentativa gravada.
    """
    runner = _get_session(sessions, session_id, student)
    attempt = runner.submit() or runner.attempt
    if attempt is None:
        raise HTTPException(status_code=409, detail="Submission already in progress")

    sessions.pop(session_id)
    return _attempt_result(attempt, runner.quiz, scoring)


@router.delete("/sessions/{session_id}")
async def discard_session(
    session_id: str,
    student: User = Depends(require_student),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Abandona a sessão sem gravar tentativa."""
    runner = _get_session(sessions, session_id, student)
    runner.discard()
    sessions.pop(session_id)
    return {"status": "discarded", "session_id": session_id}


# =============================================================================
# TENTATIVAS E RESULTADOS
# =============================================================================


@router.get("/attempts/{attempt_id}", response_model=AttemptResultResponse)
async def get_attempt(
    attempt_id: str,
    user: User = Depends(get_current_user),
    store: QuizStore = Depends(get_store),
    scoring: QuizScoringEngine = Depends(get_scoring_engine),
):
    """Resultado de uma tentativa com revisão questão a questão.

    Visível ao aluno que a realizou e ao professor autor do quiz.
    """
    attempt = store.get_attempt_by_id(attempt_id)
    if attempt is None:
        raise HTTPException(status_code=404, detail=f"Attempt {attempt_id} not found")

    quiz = store.get_quiz_by_id(attempt.quiz_id)
    is_owner = attempt.student_id == user.id
    is_author = quiz is not None and quiz.created_by == user.id
    if not (is_owner or is_author):
        raise HTTPException(status_code=403, detail="Not allowed to view this attempt")

    return _attempt_result(attempt, quiz, scoring)


@router.get("/results/student", response_model=StudentSummaryResponse)
async def student_results(
    student: User = Depends(require_student),
    store: QuizStore = Depends(get_store),
    results: ResultsAggregator = Depends(get_results_aggregator),
):
    """Painel do aluno: resumo geral e status por quiz publicado."""
    attempts = store.get_user_attempts(student.id)
    summary = results.student_summary(attempts)
    published = store.list_quizzes(published_only=True)

    quizzes = []
    for quiz in published:
        latest = results.latest_attempt(attempts, student.id, quiz.id)
        quizzes.append(
            {
                "quiz_id": quiz.id,
                "title": quiz.title,
                "status": results.quiz_status(attempts, student.id, quiz.id).value,
                "best_score": results.best_score(attempts, student.id, quiz.id),
                "latest_attempt_id": latest.id if latest else None,
            }
        )

    return StudentSummaryResponse(
        **summary,
        available_quizzes=len(published),
        quizzes=quizzes,
    )


@router.get("/results/quizzes/{quiz_id}", response_model=QuizSummaryResponse)
async def quiz_results(
    quiz_id: str,
    teacher: User = Depends(require_teacher),
    store: QuizStore = Depends(get_store),
    results: ResultsAggregator = Depends(get_results_aggregator),
):
    _get_own_quiz(store, quiz_id, teacher)
    return QuizSummaryResponse(**results.quiz_summary(store.get_quiz_attempts(quiz_id), quiz_id))


@router.get("/results/teacher", response_model=TeacherSummaryResponse)
async def teacher_results(
    teacher: User = Depends(require_teacher),
    store: QuizStore = Depends(get_store),
    results: ResultsAggregator = Depends(get_results_aggregator),
):
    """Painel do professor: totais e média por quiz próprio."""
    return TeacherSummaryResponse(**results.teacher_summary(store.quizzes, store.attempts, teacher.id))

