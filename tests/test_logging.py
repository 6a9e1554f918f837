"""
Tests for logging configuration.
"""

import logging

from app.shared.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_root_level_applied(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_uvicorn_loggers_quieted(self) -> None:
        configure_logging("INFO")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("uvicorn.error").level == logging.WARNING

    def test_sql_logging_toggle(self) -> None:
        configure_logging("INFO", log_sql=True)
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        configure_logging("INFO", log_sql=False)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
