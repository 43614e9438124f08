"""
Logging utilities with security features.

This module provides logging setup with:
- Configurable log levels and output destinations
- Log rotation for file handlers
- Sensitive data masking (passwords, API tokens, emails)
- Structured log format
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


LOGGER_NAME = "lesson_dashboard"


def mask_email(email: str) -> str:
    """
    Mask email address for safe logging.

    Examples:
        >>> mask_email("sarah@example.com")
        's***@example.com'
        >>> mask_email("invalid")
        '***'
    """
    if not email or "@" not in email:
        return "***"

    local, domain = email.split("@", 1)
    masked_local = local[0] + "***" if len(local) > 0 else "***"
    return f"{masked_local}@{domain}"


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that masks credentials in log messages.

    Covers password assignments, token assignments and bearer
    Authorization values.
    """

    _PATTERNS = [
        (re.compile(r'(password|passwd|pwd)["\']?\s*[:=]\s*["\']?([^"\'\s,]+)', re.IGNORECASE),
         r'\1: ********'),
        (re.compile(r'(token|api_key|apikey)["\']?\s*[:=]\s*["\']?([^"\'\s,]+)', re.IGNORECASE),
         r'\1: ********'),
        (re.compile(r'(Bearer)\s+[A-Za-z0-9\-._~+/]+=*', re.IGNORECASE),
         r'\1 ********'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask sensitive data in the record's message.

        Returns:
            Always True (allows all records through after masking)
        """
        message = record.getMessage()
        masked = message
        for pattern, replacement in self._PATTERNS:
            masked = pattern.sub(replacement, masked)

        if masked != message:
            record.msg = masked
            record.args = None

        return True


def setup_logger(
    name: str = LOGGER_NAME,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Module loggers (``logging.getLogger(__name__)``) inside the package
    propagate to the "lesson_dashboard" logger configured here.

    Args:
        name: Logger name (default: "lesson_dashboard")
        level: Logging level, as int or name (default: INFO)
        log_file: Optional path to log file for file output

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger(level="DEBUG", log_file="output/logs/dashboard.log")
        >>> logger.info("Dashboard started")
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    return logger
