"""Attempt Runner - Máquina de estados de uma sessão de resolução de quiz."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any, Callable

from ..models.enums import AttemptStatus
from ..models.schemas import Attempt, AttemptCreate, Question, Quiz
from ..models.state import AttemptState
from .scoring_engine import QuizScoringEngine

if TYPE_CHECKING:
    from ..storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class CountdownTimer:
    """Timer periódico cancelável, executado como task asyncio.

    Chama `on_tick` a cada `interval` segundos até que o callback retorne
    False ou o timer seja cancelado.

    Args:
        on_tick: Callback sem argumentos; retorna True para continuar
        interval: Intervalo entre ticks em segundos
    """

    def __init__(self, on_tick: Callable[[], bool], interval: float = TICK_SECONDS):
        self._on_tick = on_tick
        self._interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Agenda o timer no event loop corrente."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        self._task.add_done_callback(self._handle_completion)

    def cancel(self) -> None:
        """Cancela o timer (idempotente)."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _run(self) -> None:
        # Prazos absolutos: o atraso de cada sleep não se acumula entre ticks.
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            deadline += self._interval
            await asyncio.sleep(max(deadline - loop.time(), 0))
            if not self._on_tick():
                break

    def _handle_completion(self, task: asyncio.Task) -> None:
        """Loga se o timer terminou por erro."""
        try:
            task.result()
        except asyncio.CancelledError:
            logger.debug("Timer cancelado")
        except Exception:
            logger.exception("Timer encerrado com erro inesperado")


class AttemptRunner:
    """Conduz um aluno pelas questões de um quiz até a submissão.

    Estados: in_progress -> submitting -> completed.

    - `answer` registra/sobrescreve respostas sem mudar índice ou estado
    - `advance` / `retreat` / `go_to` movem o índice, limitado ao intervalo válido
    - `tick` decrementa o cronômetro; ao chegar a zero submete incondicionalmente
    - `submit` dispara no máximo uma vez; chamadas repetidas são ignoradas

    Example:
        >>> runner = AttemptRunner(quiz, "student-1", store)
        >>> runner.answer(quiz.questions[0].id, 1)
        >>> attempt = runner.submit()
        >>> runner.submit() is None
        True
    """

    def __init__(
        self,
        quiz: Quiz,
        student_id: str,
        store: QuizStore,
        scoring: QuizScoringEngine | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = TICK_SECONDS,
        on_complete: Callable[[Attempt], None] | None = None,
    ):
        """Inicia a sessão (captura o instante de início uma única vez).

        Args:
            quiz: Quiz a ser resolvido
            student_id: ID do aluno
            store: Store onde a tentativa será gravada
            scoring: Motor de pontuação (default: QuizScoringEngine)
            clock: Relógio monótono em segundos (injetável para testes)
            tick_interval: Intervalo do cronômetro em segundos
            on_complete: Chamado com a tentativa gravada, também quando o
                tempo esgota
        """
        self.quiz = quiz
        self.store = store
        self.scoring = scoring or QuizScoringEngine()
        self._clock = clock
        self._tick_interval = tick_interval
        self._on_complete = on_complete
        self._limit_seconds = quiz.time_limit * 60 if quiz.time_limit else None
        self._timer: CountdownTimer | None = None
        self._attempt: Attempt | None = None

        self.state = AttemptState(
            quiz_id=quiz.id,
            student_id=student_id,
            total_questions=len(quiz.questions),
            started_at=clock(),
            time_left=self._limit_seconds,
        )

    # -------------------------------------------------------------------------
    # Leitura
    # -------------------------------------------------------------------------

    @property
    def status(self) -> AttemptStatus:
        return self.state.status

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def current_question(self) -> Question | None:
        if not self.quiz.questions:
            return None
        return self.quiz.questions[self.state.current_index]

    @property
    def answers(self) -> dict[str, Any]:
        return dict(self.state.answers)

    @property
    def time_left(self) -> int | None:
        return self.state.time_left

    @property
    def can_advance(self) -> bool:
        """Política de navegação: só avança se a questão atual foi respondida."""
        question = self.current_question
        return (
            question is not None
            and self.state.has_answer(question.id)
            and not self.state.is_last_question
        )

    @property
    def attempt(self) -> Attempt | None:
        """Tentativa gravada (após a submissão)."""
        return self._attempt

    def elapsed_seconds(self) -> int:
        """Segundos inteiros desde o início da sessão."""
        return max(int(self._clock() - self.state.started_at), 0)

    # -------------------------------------------------------------------------
    # Transições
    # -------------------------------------------------------------------------

    def answer(self, question_id: str, value: Any) -> None:
        """Registra (ou sobrescreve) a resposta de uma questão."""
        if not self.state.is_active:
            logger.debug(f"Resposta ignorada, sessão {self.status.value}: {question_id}")
            return
        self.state.record_answer(question_id, value)

    def advance(self) -> int:
        return self.state.move_to(self.state.current_index + 1)

    def retreat(self) -> int:
        return self.state.move_to(self.state.current_index - 1)

    def go_to(self, index: int) -> int:
        """Salto direto pela grade de navegação (limitado, nunca recusado)."""
        return self.state.move_to(index)

    def tick(self) -> bool:
        """Decrementa o cronômetro em um segundo.

        O valor nunca fica acima do tempo restante medido pelo relógio, então
        ticks atrasados não estendem o limite.

        Returns:
            True enquanto o cronômetro deve continuar rodando
        """
        if not self.state.is_active or self.state.time_left is None:
            return False

        remaining = self._limit_seconds - self.elapsed_seconds()
        self.state.time_left = max(min(self.state.time_left - 1, remaining), 0)
        if self.state.time_left == 0:
            logger.info(f"[Quiz {self.quiz.id}] Tempo esgotado, submetendo automaticamente")
            self.submit()
            return False
        return True

    def start_timer(self) -> None:
        """Inicia o cronômetro (somente quiz com limite de tempo)."""
        if self.state.time_left is None or not self.state.is_active:
            return
        if self._timer is None:
            self._timer = CountdownTimer(self.tick, self._tick_interval)
        self._timer.start()

    def stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()

    def submit(self) -> Attempt | None:
        """Finaliza a sessão, calcula a pontuação e grava a tentativa.

        Returns:
            Attempt gravado, ou None se a sessão já foi submetida
        """
        if self.state.status != AttemptStatus.IN_PROGRESS:
            logger.warning(f"[Quiz {self.quiz.id}] Submissão repetida ignorada")
            return None

        self.state.status = AttemptStatus.SUBMITTING
        self.stop_timer()

        answers = dict(self.state.answers)
        score = self.scoring.calculate_score(self.quiz.questions, answers)

        try:
            attempt = self.store.submit_attempt(
                AttemptCreate(
                    quiz_id=self.quiz.id,
                    student_id=self.state.student_id,
                    answers=answers,
                    score=score,
                    total_points=self.quiz.total_points,
                    time_spent=self.elapsed_seconds(),
                )
            )
        except Exception:
            self.state.status = AttemptStatus.IN_PROGRESS
            raise

        self._attempt = attempt
        self.state.status = AttemptStatus.COMPLETED
        logger.info(
            f"[Quiz {self.quiz.id}] Tentativa {attempt.id} concluída: "
            f"{attempt.score}/{attempt.total_points} em {attempt.time_spent}s"
        )
        if self._on_complete is not None:
            self._on_complete(attempt)
        return attempt

    def discard(self) -> None:
        """Abandona a sessão sem gravar nada."""
        self.stop_timer()
        logger.debug(f"[Quiz {self.quiz.id}] Sessão descartada ({self.status.value})")
