# =============================================================================
# TESTES - Document Ingestion
# =============================================================================
# Testes unitários para validação de documentos e extração de texto
# =============================================================================

import pytest


def _pdf(size: int = 10, content_type: str = "application/pdf"):
    from quizify.ingest import DocumentUpload

    return DocumentUpload(filename="course.pdf", content_type=content_type, data=b"x" * size)


class TestDocumentValidation:
    """Testes para tipo e tamanho do documento."""

    def test_rejects_non_pdf(self):
        """Verifica rejeição de tipo diferente de application/pdf."""
        from quizify.exceptions import DocumentValidationError
        from quizify.ingest import DocumentIngestor

        with pytest.raises(DocumentValidationError) as exc_info:
            DocumentIngestor().validate(_pdf(content_type="image/png"))

        assert exc_info.value.message == "Please upload a valid PDF file"

    def test_rejects_oversized(self):
        """Verifica limite de 10MB."""
        from quizify.exceptions import DocumentValidationError
        from quizify.ingest import DEFAULT_MAX_BYTES, DocumentIngestor

        with pytest.raises(DocumentValidationError) as exc_info:
            DocumentIngestor().validate(_pdf(size=DEFAULT_MAX_BYTES + 1))

        assert exc_info.value.message == "File size must be less than 10MB"
        assert exc_info.value.details["size"] == DEFAULT_MAX_BYTES + 1

    def test_accepts_exact_limit(self):
        from quizify.ingest import DocumentIngestor

        DocumentIngestor(max_bytes=100).validate(_pdf(size=100))

    def test_validation_error_is_quizify_validation(self):
        from quizify.exceptions import DocumentValidationError, ValidationError

        assert issubclass(DocumentValidationError, ValidationError)


class TestTextExtraction:
    """Testes para extração de texto."""

    def test_default_extractor_returns_sample_text(self):
        from quizify.ingest import DocumentIngestor
        from quizify.templates import SAMPLE_COURSE_TEXT

        assert DocumentIngestor().extract_text(_pdf()) == SAMPLE_COURSE_TEXT

    def test_extractor_failure_wrapped(self, caplog):
        """Verifica conversão da falha em DocumentProcessingError com log ERROR."""
        from quizify.exceptions import DocumentProcessingError
        from quizify.ingest import DocumentIngestor

        def broken(data: bytes) -> str:
            raise RuntimeError("bad xref table")

        with caplog.at_level("ERROR"):
            with pytest.raises(DocumentProcessingError) as exc_info:
                DocumentIngestor(extractor=broken).extract_text(_pdf())

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "bad xref table" in caplog.text

    def test_empty_text_rejected(self):
        from quizify.exceptions import DocumentProcessingError
        from quizify.ingest import DocumentIngestor

        with pytest.raises(DocumentProcessingError):
            DocumentIngestor(extractor=lambda data: "   ").extract_text(_pdf())

    def test_extractor_not_called_for_invalid(self):
        from quizify.exceptions import DocumentValidationError
        from quizify.ingest import DocumentIngestor

        calls = []

        def extractor(data: bytes) -> str:
            calls.append(data)
            return "text"

        with pytest.raises(DocumentValidationError):
            DocumentIngestor(extractor=extractor).extract_text(_pdf(content_type="text/plain"))

        assert calls == []
