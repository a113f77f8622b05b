"""Unit tests for omero_gateway.credentials.server."""

import pytest

from omero_gateway.credentials import ServerInformation
from omero_gateway.exceptions import InvalidArgumentError


class TestBareHostname:
    def test_defaults(self) -> None:
        server = ServerInformation()
        assert server.host is None
        assert server.hostname is None
        assert server.port == -1
        assert server.protocol == ""
        assert server.is_url is False

    def test_hostname(self) -> None:
        server = ServerInformation("omero.example.org")
        assert server.host == "omero.example.org"
        assert server.hostname == "omero.example.org"
        assert server.port == -1
        assert server.protocol == ""
        assert server.is_url is False

    def test_with_port(self) -> None:
        server = ServerInformation("omero.example.org", 4064)
        assert server.port == 4064
        assert server.host == "omero.example.org"

    def test_set_port(self) -> None:
        server = ServerInformation("localhost")
        server.port = 14064
        assert server.port == 14064


class TestURL:
    def test_websocket_url(self) -> None:
        server = ServerInformation("wss://omero.example.org/omero-ws")
        assert server.is_url is True
        assert server.protocol == "wss"
        assert server.hostname == "omero.example.org"
        assert server.port == -1
        assert server.host == "wss://omero.example.org/omero-ws"

    def test_url_with_port(self) -> None:
        server = ServerInformation("ws://localhost:4065/omero-ws")
        assert server.protocol == "ws"
        assert server.hostname == "localhost"
        assert server.port == 4065

    def test_set_port_updates_url(self) -> None:
        server = ServerInformation("wss://omero.example.org/omero-ws")
        server.port = 443
        assert server.port == 443
        assert server.host == "wss://omero.example.org:443/omero-ws"

    def test_replace_port_in_url(self) -> None:
        server = ServerInformation("ws://localhost:4065/omero-ws")
        server.port = 80
        assert server.host == "ws://localhost:80/omero-ws"

    def test_ipv6_url(self) -> None:
        server = ServerInformation("https://[::1]/omero-ws")
        server.port = 443
        assert server.hostname == "::1"
        assert server.host == "https://[::1]:443/omero-ws"

    def test_set_port_keeps_userinfo(self) -> None:
        server = ServerInformation("wss://proxyuser@omero.example.org/omero-ws")
        server.port = 443
        assert server.host == "wss://proxyuser@omero.example.org:443/omero-ws"

    def test_replace_port_keeps_userinfo(self) -> None:
        server = ServerInformation("wss://proxyuser:pw@omero.example.org:8443/omero-ws")
        server.port = 443
        assert server.host == "wss://proxyuser:pw@omero.example.org:443/omero-ws"

    def test_set_port_keeps_host_case(self) -> None:
        server = ServerInformation("wss://OMERO.Example.org/omero-ws")
        server.port = 443
        assert server.host == "wss://OMERO.Example.org:443/omero-ws"

    def test_replace_ipv6_port(self) -> None:
        server = ServerInformation("https://[::1]:8443/omero-ws")
        server.port = 443
        assert server.host == "https://[::1]:443/omero-ws"

    def test_invalid_port(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid server URL"):
            ServerInformation("wss://omero.example.org:notaport/omero-ws")

    def test_switch_from_url_to_hostname(self) -> None:
        server = ServerInformation("wss://omero.example.org:443")
        server.host = "localhost"
        assert server.is_url is False
        assert server.protocol == ""
        assert server.port == -1

    def test_clear_host(self) -> None:
        server = ServerInformation("wss://omero.example.org")
        server.host = None
        assert server.host is None
        assert server.is_url is False

    def test_repr(self) -> None:
        server = ServerInformation("omero.example.org", 4064)
        assert repr(server) == "ServerInformation(host='omero.example.org', port=4064)"
