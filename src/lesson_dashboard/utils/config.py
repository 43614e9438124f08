"""
Configuration management with environment variables.

This module provides centralized configuration management
with validation and type safety.
"""

import os
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


class SecureString:
    """
    Wrapper for sensitive strings that prevents accidental exposure.

    Examples:
        >>> token = SecureString("secret-token")
        >>> str(token)  # Returns "********"
        >>> token.get_value()  # Returns actual value
    """

    def __init__(self, value: str):
        self._value = value

    def get_value(self) -> str:
        """
        Get the actual value (use with caution).

        Warning:
            Never log the result.
        """
        return self._value

    def __str__(self) -> str:
        """Return masked string representation."""
        return "********"

    def __repr__(self) -> str:
        """Return masked repr."""
        return "SecureString(********)"

    def __eq__(self, other) -> bool:
        """Compare SecureString values."""
        if isinstance(other, SecureString):
            return self._value == other._value
        return False


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """
    Application configuration manager.

    Loads configuration from environment variables (and a .env file, if
    present) and provides validated access to configuration values.

    Attributes:
        api_base_url: Lessons API base URL (empty means use the mock service)
        api_timeout: Timeout budget per service call, in seconds
        api_token: Optional bearer token for the lessons API
        use_mock_api: Whether to use the in-memory mock service
        tutor_name: Display name of the current tutor
        tutor_email: Email of the current tutor
        output_dir: Output directory for logs and exports
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Examples:
        >>> config = Config()
        >>> if config.validate():
        ...     print(f"Using API at: {config.api_base_url or 'mock'}")
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def _validate_url(url: str, name: str) -> str:
        """
        Validate URL format and scheme.

        Raises:
            ValueError: If URL is invalid
        """
        parsed = urlparse(url)

        if not parsed.scheme:
            raise ValueError(f"{name} must include URL scheme (http/https)")

        if parsed.scheme not in ['http', 'https']:
            raise ValueError(f"{name} must use http or https scheme, got: {parsed.scheme}")

        if not parsed.netloc:
            raise ValueError(f"{name} must have a valid domain")

        return url

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

        self._api_base_url = os.getenv("LESSONS_API_BASE_URL", "").strip()
        self._api_timeout_ms = os.getenv("LESSONS_API_TIMEOUT", "30000")

        token = os.getenv("LESSONS_API_TOKEN")
        self._api_token = SecureString(token) if token else None

        self._use_mock_api = _get_bool("USE_MOCK_API", False) or not self._api_base_url

        self._tutor_name = os.getenv("TUTOR_NAME", "").strip() or None
        self._tutor_email = os.getenv("TUTOR_EMAIL", "").strip() or None

        self._output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def api_base_url(self) -> str:
        """Get lessons API base URL (may be empty)."""
        return self._api_base_url

    @property
    def api_timeout(self) -> float:
        """
        Get the service call timeout in seconds.

        LESSONS_API_TIMEOUT is given in milliseconds.

        Raises:
            ValueError: If LESSONS_API_TIMEOUT is not a number
        """
        return float(self._api_timeout_ms) / 1000.0

    @property
    def api_token(self) -> Optional[SecureString]:
        """Get the lessons API bearer token (wrapped in SecureString)."""
        return self._api_token

    @property
    def use_mock_api(self) -> bool:
        """Whether to use the mock lesson service."""
        return self._use_mock_api

    @property
    def tutor_name(self) -> Optional[str]:
        """Get the configured tutor display name."""
        return self._tutor_name

    @property
    def tutor_email(self) -> Optional[str]:
        """Get the configured tutor email."""
        return self._tutor_email

    @property
    def output_dir(self) -> Path:
        """Get output directory path."""
        return self._output_dir

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self._log_level

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all configuration is valid

        Raises:
            ValueError: If validation fails, listing every problem
        """
        errors = []

        if self._api_base_url:
            try:
                self._validate_url(self._api_base_url, "LESSONS_API_BASE_URL")
            except ValueError as e:
                errors.append(str(e))

        try:
            if self.api_timeout <= 0:
                errors.append("LESSONS_API_TIMEOUT must be positive")
        except ValueError:
            errors.append(
                f"LESSONS_API_TIMEOUT must be a number of milliseconds, "
                f"got: {self._api_timeout_ms}"
            )

        if self._tutor_email and "@" not in self._tutor_email:
            errors.append("TUTOR_EMAIL must be a valid email address")

        if self._log_level not in self.VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True

    def create_output_directories(self):
        """Create output directories if they don't exist."""
        for directory in (self.output_dir / "logs", self.output_dir / "exports"):
            directory.mkdir(parents=True, exist_ok=True)


# Singleton instance
config = Config()
