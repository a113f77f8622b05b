"""Unit tests for omero_gateway.credentials.user."""

from omero_gateway.credentials import UserCredentials


class TestUserCredentials:
    def test_defaults(self) -> None:
        user = UserCredentials()
        assert user.username is None
        assert user.password is None

    def test_set_values(self) -> None:
        user = UserCredentials()
        user.username = "alice"
        user.password = "secret"
        assert user.username == "alice"
        assert user.password == "secret"

    def test_values_kept_verbatim(self) -> None:
        user = UserCredentials(username="", password="  ")
        assert user.username == ""
        assert user.password == "  "

    def test_password_hidden_in_repr(self) -> None:
        user = UserCredentials(username="alice", password="secret")
        assert "alice" in repr(user)
        assert "secret" not in repr(user)

    def test_is_session(self) -> None:
        assert UserCredentials(username="a1b2c3-session").is_session is True
        assert UserCredentials(username="a1b2c3-session", password="").is_session is True

    def test_is_not_session(self) -> None:
        assert UserCredentials(username="alice", password="secret").is_session is False
        assert UserCredentials().is_session is False
