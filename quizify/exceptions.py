"""Exceções do Quizify.

Todas carregam `message` legível e `details` estruturado, para que a camada
HTTP possa convertê-las em respostas sem inspecionar a mensagem.
"""

from typing import Any


class QuizifyError(Exception):
    """Erro base da aplicação."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(QuizifyError):
    """Entrada inválida (campos obrigatórios vazios, formato incorreto)."""


class DocumentValidationError(ValidationError):
    """Documento enviado rejeitado (tipo ou tamanho)."""


class DocumentProcessingError(QuizifyError):
    """Falha ao extrair texto ou gerar questões a partir do documento."""


class AuthenticationError(QuizifyError):
    """Usuário desconhecido ou não autenticado."""


class PermissionDeniedError(QuizifyError):
    """Usuário autenticado sem permissão para a operação."""
