"""Tests for logging setup."""

from datetime import date

import pytest

from logger import get_log_file_path, get_logger, setup_logging, shutdown_logging


@pytest.fixture
def configured_logger(test_config):
    """Set up logging for test_config and detach handlers afterwards."""
    yield setup_logging(test_config)
    shutdown_logging()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_log_file_path_is_dated(self, test_config):
        path = get_log_file_path(test_config, date(2024, 3, 9))

        assert path == test_config.log_dir / "tally-2024-03-09.log"

    def test_writes_dated_log_file(self, test_config, configured_logger):
        configured_logger.info("Created account 100")
        shutdown_logging()

        log_file = get_log_file_path(test_config)
        assert "INFO - Created account 100" in log_file.read_text()

    def test_repeated_setup_does_not_duplicate_handlers(self, test_config, configured_logger):
        logger = setup_logging(test_config)

        assert len(logger.handlers) == 2
        assert get_logger() is logger

    def test_shutdown_detaches_handlers(self, configured_logger):
        shutdown_logging()

        assert get_logger().handlers == []
