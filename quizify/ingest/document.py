"""Document Ingestion - Validação do documento e obtenção do texto."""

import logging
from dataclasses import dataclass
from typing import Callable

from ..exceptions import DocumentProcessingError, DocumentValidationError
from ..templates import SAMPLE_COURSE_TEXT

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024

TextExtractor = Callable[[bytes], str]


@dataclass(frozen=True)
class DocumentUpload:
    """Documento enviado pelo professor."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def sample_text_extractor(data: bytes) -> str:
    """Extrator padrão: não interpreta o PDF, retorna o texto de exemplo."""
    return SAMPLE_COURSE_TEXT


class DocumentIngestor:
    """Valida o documento e delega a extração de texto.

    A extração real fica fora do escopo; `extractor` pode ser trocado por
    uma implementação concreta sem alterar o restante do pipeline.

    Args:
        extractor: Função bytes -> texto
        max_bytes: Tamanho máximo aceito
    """

    def __init__(self, extractor: TextExtractor = sample_text_extractor, max_bytes: int = DEFAULT_MAX_BYTES):
        self.extractor = extractor
        self.max_bytes = max_bytes

    def validate(self, upload: DocumentUpload) -> None:
        """Rejeita documentos que não são PDF ou excedem o limite."""
        if upload.content_type != PDF_CONTENT_TYPE:
            raise DocumentValidationError(
                "Please upload a valid PDF file",
                details={"filename": upload.filename[:50], "content_type": upload.content_type},
            )
        if upload.size > self.max_bytes:
            raise DocumentValidationError(
                f"File size must be less than {self.max_bytes // (1024 * 1024)}MB",
                details={"filename": upload.filename[:50], "size": upload.size},
            )

    def extract_text(self, upload: DocumentUpload) -> str:
        """Valida e extrai o texto do documento.

        Raises:
            DocumentValidationError: tipo ou tamanho inválido
            DocumentProcessingError: falha do extrator ou texto vazio
        """
        self.validate(upload)

        try:
            text = self.extractor(upload.data)
        except Exception as e:
            logger.error(f"Erro ao processar documento '{upload.filename}': {e}")
            raise DocumentProcessingError(
                "Failed to parse PDF. Please ensure the file is not corrupted and "
                "contains readable text.",
                details={"filename": upload.filename[:50]},
            ) from e

        if not text or not text.strip():
            raise DocumentProcessingError(
                "No readable text found in document",
                details={"filename": upload.filename[:50]},
            )

        logger.debug(f"Texto extraído de '{upload.filename}': {len(text)} caracteres")
        return text
