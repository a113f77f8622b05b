"""
Server address of an OMERO server.

The address is either a bare hostname (``omero.example.org``) or a full
URL (``wss://omero.example.org/omero-ws``). Which form is used is decided
by looking for a ``://`` separator in the host string.
"""

from urllib.parse import SplitResult, urlsplit

from ..exceptions import InvalidArgumentError


class ServerInformation:
    """
    Host, port and protocol of the server to connect to.

    Example::

        server = ServerInformation("wss://omero.example.org/omero-ws")
        server.is_url    # True
        server.protocol  # "wss"
        server.port      # -1 (not given in the URL)
    """

    def __init__(self, host: str | None = None, port: int = -1):
        self._uri: SplitResult | None = None
        self._hostname: str | None = None
        self._port = -1
        if host is not None:
            self.host = host
        if port >= 0:
            self.port = port

    @property
    def host(self) -> str | None:
        """The host as given: the full URL for URL addresses, else the hostname."""
        if self._uri is not None:
            return self._uri.geturl()
        return self._hostname

    @host.setter
    def host(self, value: str | None) -> None:
        if value is None or "://" not in value:
            self._uri = None
            self._hostname = value
            self._port = -1
            return

        uri = urlsplit(value)
        try:
            port = uri.port
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid server URL '{value}': {e}") from e
        self._uri = uri
        self._hostname = uri.hostname
        self._port = port if port is not None else -1

    @property
    def hostname(self) -> str | None:
        """The bare host name, without protocol, port or path."""
        return self._hostname

    @property
    def port(self) -> int:
        """The server port, ``-1`` if not set."""
        return self._port

    @port.setter
    def port(self, value: int) -> None:
        self._port = value
        if self._uri is not None:
            userinfo, at, hostport = self._uri.netloc.rpartition("@")
            if hostport.startswith("["):
                # IPv6 literal
                host = hostport[: hostport.find("]") + 1]
            else:
                host = hostport.partition(":")[0]
            netloc = f"{userinfo}{at}{host}"
            if value >= 0:
                netloc = f"{netloc}:{value}"
            self._uri = self._uri._replace(netloc=netloc)

    @property
    def protocol(self) -> str:
        """The URL scheme, or an empty string for a bare hostname."""
        if self._uri is not None:
            return self._uri.scheme
        return ""

    @property
    def is_url(self) -> bool:
        """Check if the host was given as a URL."""
        return self._uri is not None

    def __repr__(self) -> str:
        return f"ServerInformation(host={self.host!r}, port={self._port})"
