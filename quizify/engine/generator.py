"""Question Generator - Pipeline documento -> classificador -> pool."""

import logging

from ..ingest import DocumentIngestor, DocumentUpload
from ..models.schemas import Question
from .assembler import QuestionPoolAssembler
from .classifier import ContentClassifier

logger = logging.getLogger(__name__)


class QuestionGenerator:
    """Orquestra a geração do pool de questões sugeridas.

    Args:
        classifier: Classificador de conteúdo
        assembler: Montador do pool (embaralha e limita)
        ingestor: Validação/extração de documentos
    """

    def __init__(
        self,
        classifier: ContentClassifier | None = None,
        assembler: QuestionPoolAssembler | None = None,
        ingestor: DocumentIngestor | None = None,
    ):
        self.classifier = classifier or ContentClassifier()
        self.assembler = assembler or QuestionPoolAssembler()
        self.ingestor = ingestor or DocumentIngestor()

    def generate_from_text(self, text: str) -> list[Question]:
        """Gera o pool a partir de texto já extraído."""
        return self.assembler.assemble(self.classifier.classify(text))

    def generate_from_document(self, upload: DocumentUpload) -> tuple[list[Question], list[str]]:
        """Gera o pool a partir de um documento enviado.

        Returns:
            Tuple de (questões, tópicos detectados)
        """
        text = self.ingestor.extract_text(upload)
        topics = self.classifier.detect_topics(text)
        questions = self.generate_from_text(text)
        logger.info(
            f"Documento '{upload.filename}': {len(questions)} questões, tópicos={topics}"
        )
        return questions, topics
