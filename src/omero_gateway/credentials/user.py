"""User identity sent to the server when logging in."""

from dataclasses import dataclass, field


@dataclass
class UserCredentials:
    """
    Username (or session ID) and password of the connecting user.

    Values are stored verbatim. Checking them is left to the server.

    Attributes:
        username: The username, or alternatively a session ID.
        password: The password. Ignored by the server when ``username``
            holds a session ID.
    """

    username: str | None = None
    password: str | None = field(default=None, repr=False)

    @property
    def is_session(self) -> bool:
        """Whether ``username`` is used as a session ID (no password given)."""
        return bool(self.username) and not self.password
