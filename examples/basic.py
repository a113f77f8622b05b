# OMERO Gateway Examples

# Select a part of the code and run it as a cell (Jupyter notebook like).
# Use the comments as cell definitions.

# Load requirements

import logging

from dotenv import load_dotenv

from omero_gateway import LoginCredentials, credentials_from_env
from omero_gateway.exceptions import UnsupportedProtocolError

logging.basicConfig(level=logging.DEBUG)

# Load environment from .env (OMERO_HOST, OMERO_USER, OMERO_PASSWORD, ...)
load_dotenv()


# Credentials for a bare hostname use the Glacier2 port
credentials = LoginCredentials("root", "omero", "omero.example.org")
print(credentials.server.port)  # 4064


# Websocket URLs get the default port of their protocol
credentials = LoginCredentials("root", "omero", "wss://omero.example.org/omero-ws")
print(credentials.server.port)  # 443
print(credentials.server.host)  # wss://omero.example.org:443/omero-ws


# Connection flags can be changed until the credentials are used
credentials.group_id = 3
credentials.compression = 0.5
credentials.check_version = False
credentials.application_name = "example"


# Unknown protocols are rejected
try:
    LoginCredentials("root", "omero", "ftp://omero.example.org")
except UnsupportedProtocolError as e:
    print(e)  # ftp is not supported. Supported protocols: ws, wss, http, https


# Raw connection arguments are stored and parsed on demand
credentials = LoginCredentials.from_arguments(
    ["--omero.user=root", "--omero.pass=om\\#ero", "--omero.host=localhost", "--omero.group=2"]
)
print(credentials.arguments)
resolved = credentials.resolve()
print(resolved.user.password, resolved.server.port, resolved.group_id)  # om#ero 4064 2


# Credentials from the environment
try:
    credentials = credentials_from_env()
    print(credentials)
except ValueError as e:
    print(f"Environment not configured: {e}")
