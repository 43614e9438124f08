"""
Unit tests for logging setup and sensitive data masking.
"""

import logging

import pytest

from lesson_dashboard.utils.logger import SensitiveDataFilter, mask_email, setup_logger


def make_record(msg, *args):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


class TestMaskEmail:
    """Test cases for mask_email."""

    def test_mask(self):
        """Test the local part is reduced to its first letter."""
        assert mask_email("sarah@example.com") == "s***@example.com"

    @pytest.mark.parametrize("value", ["", "invalid", None])
    def test_invalid(self, value):
        """Test values without @ are fully masked."""
        assert mask_email(value) == "***"


class TestSensitiveDataFilter:
    """Test cases for SensitiveDataFilter."""

    def test_masks_password(self):
        """Test password assignments are masked."""
        record = make_record("login with password=hunter2")

        assert SensitiveDataFilter().filter(record)
        assert "hunter2" not in record.getMessage()

    def test_masks_bearer_in_args(self):
        """Test bearer tokens passed as arguments are masked."""
        record = make_record("headers: %s", "Authorization: Bearer abc.def.ghi")

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == "headers: Authorization: Bearer ********"

    def test_masks_token(self):
        """Test token assignments are masked."""
        record = make_record('config token: "s3cr3t"')

        SensitiveDataFilter().filter(record)

        assert "s3cr3t" not in record.getMessage()

    def test_plain_message_untouched(self):
        """Test ordinary messages keep their args."""
        record = make_record("Loaded %d lessons", 6)

        SensitiveDataFilter().filter(record)

        assert record.args == (6,)
        assert record.getMessage() == "Loaded 6 lessons"


class TestSetupLogger:
    """Test cases for setup_logger."""

    def test_file_handler(self, tmp_path):
        """Test a log file is created and handlers are not duplicated."""
        log_file = tmp_path / "logs" / "dashboard.log"
        name = "lesson_dashboard.test_file_handler"

        logger = setup_logger(name, "DEBUG", str(log_file))
        again = setup_logger(name, "WARNING", str(log_file))

        assert again is logger
        assert len(logger.handlers) == 2
        assert logger.level == logging.WARNING
        assert log_file.parent.is_dir()

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
