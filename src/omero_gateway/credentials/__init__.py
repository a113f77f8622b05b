"""
OMERO Gateway Credentials Module.

Provides the user, server and login credential holders.
"""

from .login import LoginCredentials
from .server import ServerInformation
from .user import UserCredentials

__all__ = [
    "LoginCredentials",
    "ServerInformation",
    "UserCredentials",
]
