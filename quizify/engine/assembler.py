"""Question Pool Assembler - Embaralha e limita o pool de questões."""

import logging
import random

from ..models.schemas import Question

logger = logging.getLogger(__name__)

MAX_QUESTIONS = 12


class QuestionPoolAssembler:
    """Monta o pool final exibido no editor.

    Aplica uma permutação uniforme (Fisher-Yates) e mantém as primeiras
    `MAX_QUESTIONS` questões. O limite é uma política fixa.

    Args:
        rng: Gerador aleatório (injetável para testes determinísticos)
    """

    MAX_QUESTIONS = MAX_QUESTIONS

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def shuffle(self, questions: list[Question]) -> list[Question]:
        """Retorna uma copia embaralhada (a lista original não e alterada)."""
        shuffled = list(questions)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def assemble(self, questions: list[Question]) -> list[Question]:
        """Embaralha e trunca para no máximo 12 questões."""
        pool = self.shuffle(questions)[: self.MAX_QUESTIONS]
        if len(questions) > self.MAX_QUESTIONS:
            logger.debug(f"Pool truncado: {len(questions)} -> {len(pool)}")
        return pool
