"""Document Ingestion - Entrada de documentos para geração de questões."""

from .document import (
    DEFAULT_MAX_BYTES,
    PDF_CONTENT_TYPE,
    DocumentIngestor,
    DocumentUpload,
    TextExtractor,
    sample_text_extractor,
)

__all__ = [
    "DEFAULT_MAX_BYTES",
    "PDF_CONTENT_TYPE",
    "DocumentIngestor",
    "DocumentUpload",
    "TextExtractor",
    "sample_text_extractor",
]
