"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from web_selection.config import LoggingSettings, Settings
from web_selection.utils import setup_logging, setup_logging_from_settings


@pytest.fixture
def library_logger():
    """Provide the library logger, removing installed handlers afterwards."""
    logger = logging.getLogger("web_selection")
    level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)


class TestSetupLogging:
    """Test configuring the library logger."""

    def test_console_handler(self, library_logger):
        """Test a rich console handler is installed."""
        setup_logging(level="DEBUG")

        assert library_logger.level == logging.DEBUG
        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0], RichHandler)

    def test_file_handler(self, library_logger, tmp_path):
        """Test records are also written to a log file."""
        log_file = tmp_path / "selection.log"
        setup_logging(level="INFO", log_file=str(log_file))

        logging.getLogger("web_selection.core.selection").info("resolved 'a b'")
        for handler in library_logger.handlers:
            handler.flush()

        assert "resolved 'a b'" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self, library_logger):
        """Test calling setup twice does not duplicate handlers."""
        setup_logging()
        setup_logging()
        assert len(library_logger.handlers) == 1

    def test_from_settings(self, library_logger):
        """Test LoggingSettings are applied."""
        setup_logging_from_settings(Settings(logging=LoggingSettings(level="WARNING")))
        assert library_logger.level == logging.WARNING

    def test_debug_overrides_level(self, library_logger):
        """Test the debug flag forces DEBUG over the configured level."""
        setup_logging_from_settings(
            Settings(debug=True, logging=LoggingSettings(level="ERROR"))
        )
        assert library_logger.level == logging.DEBUG

    def test_selection_logs_debug(self, driver, make_element, caplog):
        """Test selections log resolution at DEBUG."""
        from web_selection import Selection

        driver.elements["#go"] = [make_element()]
        with caplog.at_level(logging.DEBUG, logger="web_selection"):
            Selection(driver, "#go").click()

        assert "Clicking '#go'" in caplog.text
