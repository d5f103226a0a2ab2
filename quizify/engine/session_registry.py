"""Session Registry - Sessões de resolução ativas, com limpeza automática.

Sessões saem do registro quando o aluno submete ou abandona. As que ficam
para trás são removidas na próxima operação do registro:

- submetidas pelo cronômetro: após `completed_grace` segundos, tempo para o
  cliente ainda buscar o resultado pela sessão
- sem limite de tempo e sem acesso há mais de `idle_timeout` segundos:
  descartadas sem gravar tentativa
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from ..models.schemas import Attempt, Quiz, generate_id
from .attempt_runner import AttemptRunner

if TYPE_CHECKING:
    from ..storage.quiz_store import QuizStore

logger = logging.getLogger(__name__)

SESSION_IDLE_SECONDS = 2 * 60 * 60
COMPLETED_GRACE_SECONDS = 5 * 60


@dataclass
class SessionEntry:
    """Runner registrado e seus instantes de controle."""

    runner: AttemptRunner
    last_accessed: float
    completed_at: float | None = None


class SessionRegistry:
    """Registro em memória de sessões (session_id -> AttemptRunner).

    Args:
        idle_timeout: Segundos sem acesso até descartar sessão sem limite de tempo
        completed_grace: Segundos que uma sessão concluída permanece consultável
        clock: Relógio monótono em segundos (injetável para testes)
    """

    def __init__(
        self,
        idle_timeout: float = SESSION_IDLE_SECONDS,
        completed_grace: float = COMPLETED_GRACE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._entries: dict[str, SessionEntry] = {}
        self._idle_timeout = idle_timeout
        self._completed_grace = completed_grace
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._entries

    def open(
        self,
        quiz: Quiz,
        student_id: str,
        store: QuizStore,
        **runner_options: Any,
    ) -> tuple[str, AttemptRunner]:
        """Cria e registra o runner de uma nova sessão.

        Args:
            quiz: Quiz a ser resolvido
            student_id: ID do aluno
            store: Store onde a tentativa será gravada
            **runner_options: Repassados ao AttemptRunner (scoring, clock, tick_interval)

        Returns:
            Tupla (session_id, runner)
        """
        self.prune()
        session_id = generate_id()

        def on_complete(attempt: Attempt) -> None:
            entry = self._entries.get(session_id)
            if entry is not None:
                entry.completed_at = self._clock()

        runner = AttemptRunner(quiz, student_id, store, on_complete=on_complete, **runner_options)
        self._entries[session_id] = SessionEntry(runner=runner, last_accessed=self._clock())
        return session_id, runner

    def get(self, session_id: str) -> AttemptRunner | None:
        """Retorna o runner (e renova o último acesso), ou None."""
        self.prune()
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        entry.last_accessed = self._clock()
        return entry.runner

    def pop(self, session_id: str) -> AttemptRunner | None:
        entry = self._entries.pop(session_id, None)
        return entry.runner if entry else None

    def prune(self) -> int:
        """Remove sessões concluídas após a carência e sessões ociosas.

        Returns:
            Número de sessões removidas
        """
        now = self._clock()
        expired = []
        for session_id, entry in self._entries.items():
            if entry.completed_at is not None:
                if now - entry.completed_at > self._completed_grace:
                    expired.append(session_id)
            elif entry.runner.time_left is None and now - entry.last_accessed > self._idle_timeout:
                entry.runner.discard()
                expired.append(session_id)

        for session_id in expired:
            del self._entries[session_id]
        if expired:
            logger.info(f"{len(expired)} sessões encerradas removidas do registro")
        return len(expired)

    def discard_all(self) -> int:
        """Descarta todas as sessões (shutdown).

        Returns:
            Número de sessões descartadas
        """
        count = len(self._entries)
        for entry in self._entries.values():
            entry.runner.discard()
        self._entries.clear()
        return count
