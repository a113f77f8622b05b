from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import UnsupportedProtocolError

# Glacier2 router port, used when the server is given as a bare hostname.
GLACIER2_PORT = 4064

# Default ports for servers given as a URL.
DEFAULT_PORTS: Mapping[str, int] = MappingProxyType(
    {
        "ws": 80,
        "wss": 443,
        "http": 80,
        "https": 443,
    }
)


def default_port(protocol: str | None) -> int:
    """Return the default port for ``protocol`` (case-insensitive).

    Raises:
        UnsupportedProtocolError: If the protocol has no known default port.
            The message lists every supported protocol.
    """
    port = DEFAULT_PORTS.get((protocol or "").lower())
    if port is None:
        supported = tuple(DEFAULT_PORTS)
        raise UnsupportedProtocolError(
            f"{protocol} is not supported. Supported protocols: {', '.join(supported)}",
            protocol=protocol,
            supported=supported,
        )
    return port
