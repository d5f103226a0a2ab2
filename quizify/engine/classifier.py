"""Content Classifier - Seleção de questões modelo por palavras-chave."""

import logging

from ..models.schemas import Question, QuestionList
from ..templates import (
    FILLER_QUESTIONS,
    TOPIC_DETECTION_KEYWORDS,
    TOPIC_KEYWORDS,
    TOPIC_QUESTIONS,
)

logger = logging.getLogger(__name__)


def _match(table: dict[str, list[str]], text: str) -> list[str]:
    lowered = text.lower()
    return [
        topic
        for topic, keywords in table.items()
        if any(keyword in lowered for keyword in keywords)
    ]


class ContentClassifier:
    """Classificador de conteúdo baseado em palavras-chave.

    Não gera questões: o texto apenas decide quais tópicos da tabela entram.
    Para cada tópico (na ordem da tabela) cujo gatilho aparece no texto em
    minúsculas, todas as questões modelo do tópico são incluídas. As questões
    de preenchimento (2 verdadeiro/falso + 1 resposta curta) entram sempre.

    Os tópicos informados ao usuário vêm de uma segunda tabela, mais ampla
    (``TOPIC_DETECTION_KEYWORDS``), que não influencia a seleção.

    Example:
        >>> classifier = ContentClassifier()
        >>> questions = classifier.classify("A stack and a queue walk into a bar")
        >>> len(questions)  # 2 de Data Structures + 3 de preenchimento
        5
    """

    TOPIC_KEYWORDS = TOPIC_KEYWORDS
    TOPIC_DETECTION_KEYWORDS = TOPIC_DETECTION_KEYWORDS
    TOPIC_QUESTIONS = TOPIC_QUESTIONS
    FILLER_QUESTIONS = FILLER_QUESTIONS

    def __init__(self):
        """Inicializa com as tabelas padrão (cópias, para permitir extensão)."""
        self._keywords = {topic: list(kw) for topic, kw in self.TOPIC_KEYWORDS.items()}
        self._detection_keywords = {
            topic: list(kw) for topic, kw in self.TOPIC_DETECTION_KEYWORDS.items()
        }
        self._questions = {topic: list(qs) for topic, qs in self.TOPIC_QUESTIONS.items()}
        self._fillers = list(self.FILLER_QUESTIONS)

    def detect_topics(self, text: str) -> list[str]:
        """Retorna os tópicos cujos gatilhos de detecção aparecem no texto.

        Args:
            text: Texto extraído do documento

        Returns:
            Nomes dos tópicos, na ordem da tabela de detecção
        """
        return _match(self._detection_keywords, text)

    def classify(self, text: str) -> list[Question]:
        """Seleciona as questões candidatas para o texto.

        Cada chamada produz novas instâncias (com IDs novos); o conteúdo é
        determinístico para um mesmo texto.

        Args:
            text: Texto extraído do documento

        Returns:
            Questões dos tópicos encontrados seguidas das de preenchimento
        """
        templates: list[dict] = []
        topics = _match(self._keywords, text)
        for topic in topics:
            templates.extend(self._questions.get(topic, []))
        templates.extend(self._fillers)

        questions = QuestionList.validate_python([dict(t) for t in templates])
        logger.debug(
            f"Classificação: tópicos={topics} questões={len(questions)}"
        )
        return questions

    def add_topic(self, topic: str, keywords: list[str], questions: list[dict]) -> None:
        """Adiciona (ou substitui) um tópico nas duas tabelas.

        Args:
            topic: Nome do tópico
            keywords: Gatilhos (comparados em minúsculas)
            questions: Questões modelo (validadas na próxima classificação)
        """
        lowered = [kw.lower() for kw in keywords]
        self._keywords[topic] = lowered
        self._detection_keywords[topic] = list(lowered)
        self._questions[topic] = list(questions)
