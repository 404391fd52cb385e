"""
Tests for loguru sink setup.
"""

from loguru import logger

from strikepath.config.settings import LoggingConfig
from strikepath.utils.logging_setup import setup_logging


class TestSetupLogging:
    """Test setup_logging."""

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "strikepath.log"

        setup_logging(LoggingConfig(level="WARNING", log_file=str(log_file)))
        logger.debug("debug line")
        logger.complete()

        assert log_file.exists()
        assert "debug line" in log_file.read_text()

        logger.remove()

    def test_console_only(self, tmp_path):
        setup_logging(LoggingConfig(log_file=None))
        logger.info("console line")

        assert list(tmp_path.iterdir()) == []

        logger.remove()
