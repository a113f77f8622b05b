"""
Pytest configuration for omero-gateway tests.

Shared connection constants are defined here so every test file can import
them instead of hardcoding hosts and credentials.
"""

import os

# ---------------------------------------------------------------------------
# Shared connection constants (import these in test files)
# ---------------------------------------------------------------------------
OMERO_TEST_HOST = os.getenv("OMERO_TEST_HOST", "omero.example.org")
OMERO_TEST_WS_URL = os.getenv("OMERO_TEST_WS_URL", f"wss://{OMERO_TEST_HOST}/omero-ws")
OMERO_TEST_USER = os.getenv("OMERO_TEST_USER", "root")
OMERO_TEST_PASS = os.getenv("OMERO_TEST_PASS", "omero")
