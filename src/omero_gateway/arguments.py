"""
Parser for raw OMERO connection arguments.

Turns an argument vector such as::

    ["--omero.user=alice", "--omero.pass=secret", "--omero.host=omero.example.org"]

into typed values, and those into ``LoginCredentials``. Entries that are
not ``--omero.<key>=<value>`` options, or whose key is unknown, are
ignored so the vector may be shared with other command line tools.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .credentials.login import LoginCredentials
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ARGUMENT_PREFIX = "--omero."


class ArgumentValues(BaseModel):
    """
    Connection values read from an argument vector.

    Field aliases are the option keys (``--omero.pass`` → ``password``).
    Flags left as None keep the ``LoginCredentials`` defaults.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user: str | None = None
    password: str | None = Field(default=None, alias="pass")
    host: str | None = None
    port: int = -1
    group: int = -1
    application_name: str | None = Field(default=None, alias="app")
    compression: float | None = None
    encryption: bool | None = None
    check_network: bool | None = Field(default=None, alias="checknetwork")
    check_version: bool | None = Field(default=None, alias="checkversion")

    def to_credentials(self, defaults: LoginCredentials | None = None) -> LoginCredentials:
        """
        Build login credentials from these values.

        Args:
            defaults: Credentials whose connection flags are used for every
                flag not given in the arguments

        Raises:
            InvalidArgumentError: If no host was given
            UnsupportedProtocolError: If the host is a URL with an unknown protocol
        """
        if self.host is None:
            raise InvalidArgumentError("No host given in connection arguments")

        credentials = LoginCredentials(self.user, self.password, self.host, self.port)
        if defaults is not None:
            credentials.application_name = defaults.application_name
            credentials.encryption = defaults.encryption
            credentials.check_network = defaults.check_network
            credentials.check_version = defaults.check_version
            credentials.compression = defaults.compression
            credentials.group_id = defaults.group_id

        given = self.model_fields_set
        if "group" in given:
            credentials.group_id = self.group
        if "application_name" in given:
            credentials.application_name = self.application_name
        if self.compression is not None:
            credentials.compression = self.compression
        if self.encryption is not None:
            credentials.encryption = self.encryption
        if self.check_network is not None:
            credentials.check_network = self.check_network
        if self.check_version is not None:
            credentials.check_version = self.check_version
        return credentials


def _known_keys() -> set[str]:
    return {field.alias or name for name, field in ArgumentValues.model_fields.items()}


def parse_arguments(args: Iterable[str]) -> ArgumentValues:
    """
    Parse ``--omero.<key>=<value>`` options.

    Keys are case-insensitive. A later option overrides an earlier one
    with the same key. Escaped ``\\#`` characters are unescaped.

    Raises:
        InvalidArgumentError: If a value cannot be converted to its type
    """
    known = _known_keys()
    raw: dict[str, str] = {}

    for arg in args:
        if not arg.startswith(ARGUMENT_PREFIX) or "=" not in arg:
            logger.debug(f"Ignoring connection argument: {arg.split('=', 1)[0]}")
            continue
        key, value = arg[len(ARGUMENT_PREFIX) :].split("=", 1)
        key = key.lower()
        if key not in known:
            logger.debug(f"Ignoring unknown connection option: {key}")
            continue
        raw[key] = value.replace("\\#", "#")

    try:
        return ArgumentValues.model_validate(raw)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid connection arguments: {e}") from e


__all__ = ["ARGUMENT_PREFIX", "ArgumentValues", "parse_arguments"]
