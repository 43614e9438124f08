"""
Unit tests for the authenticated-user session.
"""

from lesson_dashboard.auth import UNKNOWN_TUTOR, AuthSession, SessionState
from lesson_dashboard.models.lesson import User
from lesson_dashboard.utils.config import SecureString


class TestAuthSession:
    """Test cases for AuthSession."""

    def test_initial_state(self):
        """Test a new session is logged out."""
        session = AuthSession()

        assert session.state == SessionState.NOT_LOGGED_IN
        assert not session.is_logged_in
        assert session.current_user is None
        assert session.display_name == UNKNOWN_TUTOR

    def test_login_uses_default_name(self):
        """Test login names the user after the configured tutor."""
        session = AuthSession(default_name="Sarah Tan")

        result = session.login("Sarah@Example.com", SecureString("secret"))

        assert result.is_success
        assert result.value.id == "sarah@example.com"
        assert session.display_name == "Sarah Tan"
        assert session.is_logged_in

    def test_login_falls_back_to_email(self):
        """Test login without a default name uses the email local part."""
        session = AuthSession()

        session.login("james@example.com", "pw")

        assert session.display_name == "james"

    def test_empty_credentials(self):
        """Test empty email or password fails without logging in."""
        session = AuthSession()

        result = session.login("  ", SecureString(""))

        assert result.is_failure
        assert result.message == "Login failed. Please check your credentials."
        assert not session.is_logged_in

    def test_logout(self):
        """Test logging out clears the user."""
        session = AuthSession()
        session.mark_logged_in(User(id="u1", name="Sarah Tan", email="sarah@example.com"))

        session.mark_logged_out()

        assert session.current_user is None
        assert session.display_name == UNKNOWN_TUTOR

    def test_session_info(self):
        """Test session info reports the user name, not the email."""
        session = AuthSession()
        session.mark_logged_in(User(id="u1", name="Sarah Tan", email="sarah@example.com"))

        info = session.get_session_info()

        assert info["state"] == "logged_in"
        assert info["user"] == "Sarah Tan"
        assert info["login_time"] is not None
