"""
OMERO Gateway Exceptions.

Custom exception hierarchy for the credentials layer.
"""


class GatewayError(Exception):
    """Base exception for all OMERO gateway errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidArgumentError(GatewayError, ValueError):
    """Raised when a required input is missing or cannot be interpreted."""

    pass


class UnsupportedProtocolError(GatewayError, ValueError):
    """Raised when no default port is known for a URL protocol."""

    def __init__(
        self,
        message: str,
        protocol: str | None = None,
        supported: tuple[str, ...] = (),
        code: int | None = None,
    ):
        self.protocol = protocol
        self.supported = supported
        super().__init__(message, code)
