"""
Environment-based configuration.

Reads login credentials from ``OMERO_*`` environment variables, which
is convenient for scripts and CI jobs.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from .credentials.login import LoginCredentials
from .exceptions import InvalidArgumentError

ENV_USER = "OMERO_USER"
ENV_PASSWORD = "OMERO_PASSWORD"
ENV_HOST = "OMERO_HOST"
ENV_PORT = "OMERO_PORT"
ENV_GROUP = "OMERO_GROUP"
ENV_APP = "OMERO_APP"


def _int_value(environ: Mapping[str, str], name: str) -> int:
    value = environ.get(name, "").strip()
    if not value:
        return -1
    try:
        return int(value)
    except ValueError as e:
        raise InvalidArgumentError(f"{name} must be an integer, got '{value}'") from e


def credentials_from_env(environ: Mapping[str, str] | None = None) -> LoginCredentials:
    """
    Create login credentials from environment variables.

    Args:
        environ: Variables to read, ``os.environ`` by default

    Raises:
        InvalidArgumentError: If ``OMERO_HOST`` is not set, or ``OMERO_PORT``
            or ``OMERO_GROUP`` is not an integer
    """
    if environ is None:
        environ = os.environ

    host = environ.get(ENV_HOST)
    if not host:
        raise InvalidArgumentError(f"{ENV_HOST} is not set")

    credentials = LoginCredentials(
        environ.get(ENV_USER),
        environ.get(ENV_PASSWORD),
        host,
        _int_value(environ, ENV_PORT),
    )
    credentials.group_id = _int_value(environ, ENV_GROUP)
    credentials.application_name = environ.get(ENV_APP)
    return credentials
