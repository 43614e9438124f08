"""
Authenticated-user context.

Tracks which tutor is logged in. The lesson store reads the display name
from here when a claim response does not say who the tutor is.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .models.lesson import User
from .models.result import Result
from .utils.config import SecureString
from .utils.logger import mask_email


logger = logging.getLogger(__name__)


UNKNOWN_TUTOR = "Unknown Tutor"


class SessionState(Enum):
    """Session states."""

    NOT_LOGGED_IN = "not_logged_in"
    LOGGED_IN = "logged_in"


class AuthSession:
    """
    Holds the current tutor's login state.

    Login is mocked: any non-empty email and password succeed.

    Examples:
        >>> auth = AuthSession(default_name="Sarah Tan")
        >>> result = auth.login("sarah@example.com", SecureString("secret"))
        >>> auth.display_name
        'Sarah Tan'
    """

    def __init__(self, default_name: Optional[str] = None):
        """
        Initialize AuthSession.

        Args:
            default_name: Display name to give users logging in
                (defaults to the email's local part)
        """
        self.default_name = default_name
        self._state = SessionState.NOT_LOGGED_IN
        self._user: Optional[User] = None
        self._login_time: Optional[datetime] = None

    @property
    def state(self) -> SessionState:
        """Get current session state."""
        return self._state

    @property
    def is_logged_in(self) -> bool:
        """Check if a tutor is logged in."""
        return self._state == SessionState.LOGGED_IN

    @property
    def current_user(self) -> Optional[User]:
        """Get the logged-in tutor, if any."""
        return self._user

    @property
    def display_name(self) -> str:
        """Get the logged-in tutor's name, or "Unknown Tutor"."""
        if self._user and self._user.name:
            return self._user.name
        return UNKNOWN_TUTOR

    def login(self, email: str, password: Union[SecureString, str]) -> Result[User]:
        """
        Log a tutor in.

        Args:
            email: Tutor email
            password: Tutor password

        Returns:
            Result containing the User on success
        """
        secret = password.get_value() if isinstance(password, SecureString) else password

        if not email or not email.strip() or not secret:
            logger.warning("Login rejected: empty credentials")
            return Result.failure("Login failed. Please check your credentials.")

        email = email.strip()
        name = self.default_name or email.split("@", 1)[0]
        user = User(id=email.lower(), name=name, email=email)

        self.mark_logged_in(user)
        return Result.success(user, "Login successful")

    def mark_logged_in(self, user: User):
        """Mark ``user`` as the logged-in tutor."""
        self._state = SessionState.LOGGED_IN
        self._user = user
        self._login_time = datetime.now()
        logger.info(f"Session marked as logged in: {mask_email(user.email)}")

    def mark_logged_out(self):
        """Clear the logged-in tutor."""
        self._state = SessionState.NOT_LOGGED_IN
        self._user = None
        self._login_time = None
        logger.info("Session marked as logged out")

    def get_session_info(self) -> dict:
        """Get session information for debugging."""
        return {
            "state": self._state.value,
            "logged_in": self.is_logged_in,
            "user": self._user.name if self._user else None,
            "login_time": self._login_time.isoformat() if self._login_time else None,
        }
