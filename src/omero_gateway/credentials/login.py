"""
Login credentials for connecting to an OMERO server.

Holds the user, the server address and the connection flags handed to
the gateway when a session is opened.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..constants import GLACIER2_PORT, default_port
from ..exceptions import InvalidArgumentError
from .server import ServerInformation
from .user import UserCredentials

logger = logging.getLogger(__name__)


class LoginCredentials:
    """
    Everything needed to connect to an OMERO server.

    There are three ways to build an instance:

        # Empty, to be filled in through the attributes
        credentials = LoginCredentials()

        # Username, password and host (port derived from the host)
        credentials = LoginCredentials("user", "secret", "omero.example.org")
        credentials = LoginCredentials("user", "secret", "wss://omero.example.org/omero-ws")

        # Raw connection arguments, parsed later by the gateway
        credentials = LoginCredentials.from_arguments(["--omero.host=omero.example.org"])

    All attributes may be changed until the credentials are handed over
    to the gateway. Nothing prevents changes afterwards, but they have no
    effect on an open session.

    Attributes:
        user: The user credentials.
        server: The server address.
        application_name: Name of the application connecting to the server.
        encryption: Whether to encrypt the connection.
        check_network: Whether to perform network checks.
        check_version: Whether to check that client and server versions match.
        group_id: ID of the group to use, ``-1`` for the user's default group.
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        host: str | None = None,
        port: int = -1,
    ):
        """
        Initialize login credentials.

        Args:
            username: The username or alternatively a session ID (in which
                case the password is ignored)
            password: The password
            host: The server hostname or websocket URL
            port: The server port. When negative, the port is taken from the
                URL, or derived from its protocol, or defaults to the Glacier2
                port for bare hostnames.

        Raises:
            InvalidArgumentError: If a username, password or port is given without a host
            UnsupportedProtocolError: If the port has to be derived from a URL
                whose protocol has no default port
        """
        self.user = UserCredentials()
        self.server = ServerInformation()
        self.application_name: str | None = None
        self.encryption = True
        self.check_network = True
        self.check_version = True
        self._compression = 0.85
        self.group_id = -1
        self._arguments: tuple[str, ...] | None = None

        if host is None:
            if username is not None or password is not None:
                raise InvalidArgumentError("A host is required when credentials are given")
            if port >= 0:
                raise InvalidArgumentError("A host is required when a port is given")
            return

        self.user.username = username
        self.user.password = password
        self.server.host = host
        self._resolve_port(port)

    def _resolve_port(self, port: int) -> None:
        server = self.server
        if port >= 0:
            server.port = port
        elif server.port >= 0:
            # Port given in the URL
            pass
        elif not server.is_url:
            server.port = GLACIER2_PORT
        else:
            server.port = default_port(server.protocol)
        logger.debug(f"Using port {server.port} for {server.host}")

    @classmethod
    def from_arguments(cls, args: Iterable[str] | None) -> LoginCredentials:
        """
        Create credentials from raw connection arguments.

        The arguments are stored as given. They are not parsed until
        ``resolve()`` is called. The ``#`` character has to be escaped
        with a backslash.

        Args:
            args: The connection arguments, e.g. ``["--omero.host=localhost"]``

        Raises:
            InvalidArgumentError: If ``args`` is None
        """
        if args is None:
            raise InvalidArgumentError("No connection arguments")
        if isinstance(args, str):
            raise InvalidArgumentError("Connection arguments must be a sequence of strings, not a string")
        credentials = cls()
        credentials._arguments = tuple(args)
        return credentials

    @property
    def arguments(self) -> tuple[str, ...] | None:
        """The raw connection arguments, or None if not built from arguments."""
        return self._arguments

    @property
    def compression(self) -> float:
        """The data compression level, between 0.0 and 1.0."""
        return self._compression

    @compression.setter
    def compression(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            logger.warning(f"Compression level {value} is outside the range 0.0-1.0")
        self._compression = value

    def resolve(self) -> LoginCredentials:
        """
        Build structured credentials from the raw connection arguments.

        Returns:
            New credentials with user and server taken from the arguments.
            Flags not given in the arguments are copied from these credentials.

        Raises:
            InvalidArgumentError: If these credentials were not built from
                arguments, or the arguments are incomplete or malformed
        """
        from ..arguments import parse_arguments

        if self._arguments is None:
            raise InvalidArgumentError("Credentials were not created from connection arguments")
        return parse_arguments(self._arguments).to_credentials(defaults=self)

    def __repr__(self) -> str:
        if self._arguments is not None:
            return f"LoginCredentials(arguments={len(self._arguments)})"
        return f"LoginCredentials(user={self.user!r}, server={self.server!r}, group_id={self.group_id})"
