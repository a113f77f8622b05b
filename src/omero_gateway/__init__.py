"""
OMERO Gateway - connection credentials for OMERO servers.

Collects everything a client needs to open a session on an OMERO server:

- User credentials (username or session ID, password)
- Server address (bare hostname or websocket/HTTP URL)
- Connection flags (encryption, network and version checks, compression, group)

The default port is derived from the address when none is given.
"""

from .arguments import ArgumentValues, parse_arguments
from .config import credentials_from_env
from .constants import DEFAULT_PORTS, GLACIER2_PORT, default_port
from .credentials import LoginCredentials, ServerInformation, UserCredentials
from .exceptions import (
    GatewayError,
    InvalidArgumentError,
    UnsupportedProtocolError,
)

__version__ = "5.1.0"
__all__ = [
    # Credentials
    "LoginCredentials",
    "ServerInformation",
    "UserCredentials",
    # Arguments and configuration
    "ArgumentValues",
    "parse_arguments",
    "credentials_from_env",
    # Ports
    "DEFAULT_PORTS",
    "GLACIER2_PORT",
    "default_port",
    # Exceptions
    "GatewayError",
    "InvalidArgumentError",
    "UnsupportedProtocolError",
]
