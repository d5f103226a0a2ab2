# =============================================================================
# TESTES - Config
# =============================================================================
# Testes unitários para configuração via variáveis de ambiente
# =============================================================================

import logging
import os
from pathlib import Path
from unittest.mock import patch


class TestQuizifyConfig:
    """Testes para QuizifyConfig."""

    def test_defaults(self):
        from quizify.config import QuizifyConfig, StorageBackend

        config = QuizifyConfig()

        assert config.data_dir == Path(".quizify")
        assert config.storage_backend == StorageBackend.FILE
        assert config.max_upload_mb == 10
        assert config.max_upload_bytes == 10 * 1024 * 1024
        assert config.log_level == "INFO"
        assert config.session_idle_minutes == 120

    def test_from_env(self, tmp_path):
        """Verifica leitura de todas as variáveis."""
        from quizify.config import QuizifyConfig, StorageBackend

        env = {
            "QUIZIFY_DATA_DIR": str(tmp_path),
            "QUIZIFY_STORAGE": "MEMORY",
            "QUIZIFY_MAX_UPLOAD_MB": "5",
            "LOG_LEVEL": "debug",
            "QUIZIFY_CORS_ORIGINS": "http://a.test, http://b.test,",
            "QUIZIFY_SESSION_IDLE_MINUTES": "30",
        }
        with patch.dict(os.environ, env):
            config = QuizifyConfig.from_env()

        assert config.data_dir == tmp_path
        assert config.storage_backend == StorageBackend.MEMORY
        assert config.max_upload_bytes == 5 * 1024 * 1024
        assert config.log_level == "DEBUG"
        assert config.cors_origins == ["http://a.test", "http://b.test"]
        assert config.session_idle_minutes == 30

    def test_invalid_storage_falls_back_to_file(self):
        from quizify.config import QuizifyConfig, StorageBackend

        with patch.dict(os.environ, {"QUIZIFY_STORAGE": "redis"}):
            config = QuizifyConfig.from_env()

        assert config.storage_backend == StorageBackend.FILE

    def test_default_cors_origins(self, clean_env):
        from quizify.config import DEFAULT_CORS_ORIGINS, QuizifyConfig

        config = QuizifyConfig.from_env()

        assert config.cors_origins == DEFAULT_CORS_ORIGINS
        assert config.cors_origins is not DEFAULT_CORS_ORIGINS


class TestConfigureLogging:
    """Testes para configuração de logging."""

    def test_sets_level(self):
        from quizify.config import configure_logging

        logger = configure_logging("DEBUG")

        assert logger.name == "quizify"
        assert logging.getLogger().level == logging.DEBUG

        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
