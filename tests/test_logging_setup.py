"""
Tests for logging setup utilities.
"""

import sys
from pathlib import Path
from unittest.mock import Mock, patch

from yamlconf.infrastructure.config.models import LoggingConfig
from yamlconf.infrastructure.logging.setup import get_logger, setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    @patch('yamlconf.infrastructure.logging.setup.loguru_logger')
    def test_console_only(self, mock_logger: Mock) -> None:
        setup_logging(LoggingConfig(level="DEBUG", console_enabled=True, file_enabled=False))

        mock_logger.remove.assert_called_once()
        mock_logger.add.assert_called_once()
        args, kwargs = mock_logger.add.call_args
        assert args[0] is sys.stderr
        assert kwargs['level'] == "DEBUG"

    @patch('yamlconf.infrastructure.logging.setup.loguru_logger')
    def test_file_sink(self, mock_logger: Mock, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        config = LoggingConfig(console_enabled=False, file_enabled=True,
                               log_directory=str(log_dir), max_file_size="1MB", backup_count=2)

        setup_logging(config)

        assert log_dir.is_dir()
        mock_logger.add.assert_called_once()
        args, kwargs = mock_logger.add.call_args
        assert args[0] == log_dir / "yamlconf.log"
        assert kwargs['rotation'] == "1MB"
        assert kwargs['retention'] == 2

    @patch('yamlconf.infrastructure.logging.setup.loguru_logger')
    def test_no_sinks(self, mock_logger: Mock, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"

        setup_logging(LoggingConfig(console_enabled=False, file_enabled=False,
                                    log_directory=str(log_dir)))

        mock_logger.remove.assert_called_once()
        mock_logger.add.assert_not_called()
        assert not log_dir.exists()


class TestGetLogger:
    """Test cases for get_logger."""

    @patch('yamlconf.infrastructure.logging.setup.loguru_logger')
    def test_binds_name(self, mock_logger: Mock) -> None:
        logger = get_logger("yamlconf.test")

        mock_logger.bind.assert_called_once_with(name="yamlconf.test")
        assert logger is mock_logger.bind.return_value

    def test_real_logger_has_level_methods(self) -> None:
        logger = get_logger("yamlconf.test")

        for level in ("trace", "debug", "info", "warning", "error"):
            assert callable(getattr(logger, level))
