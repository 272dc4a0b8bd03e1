import io
import socket

import pytest

from ircserv.client import Client
from ircserv.diagnostics import Reporter
from ircserv.server import (
    WELCOME,
    PortConversionError,
    Server,
    ServerError,
    parse_port,
)

PASSWORD = "password"


def pump(server, condition, attempts=100):
    """Poll the server until condition() holds or attempts run out."""
    for _ in range(attempts):
        if condition():
            return
        server.poll_once(0.05)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def server(stream):
    password = PASSWORD
    srv = Server("0", password, host="127.0.0.1", reporter=Reporter(stream=stream))
    yield srv
    srv.close()


@pytest.fixture
def peer(server):
    conn = socket.create_connection(server.address, timeout=2)
    yield conn
    conn.close()


@pytest.mark.parametrize(
    "text, expected",
    [("6667", 6667), ("+12", 12), (" 42", 42), ("-1", -1), ("", 0)],
)
def test_parse_port_accepts_numbers(text, expected):
    assert parse_port(text) == expected


@pytest.mark.parametrize(
    "text",
    ["abc", "12x", " ", "9223372036854775807", "-9223372036854775808", "1" * 30],
)
def test_parse_port_rejects(text):
    with pytest.raises(PortConversionError):
        parse_port(text)


def test_port_conversion_error_message():
    with pytest.raises(ServerError, match="Failed to convert the port"):
        Server("port", PASSWORD)


def test_server_keeps_password_and_port(server):
    assert server.password == PASSWORD
    assert server.port == 0
    assert server.address[1] > 0


def test_bind_failure_on_busy_port(server):
    with pytest.raises(ServerError, match="bind failed"):
        Server(str(server.address[1]), PASSWORD, host="127.0.0.1")


def test_client_is_accepted_and_greeted(server, peer):
    pump(server, lambda: len(server.clients) == 1)
    assert len(server.clients) == 1
    expected = WELCOME.encode() + b"\0"
    received = b""
    while len(received) < len(expected):
        chunk = peer.recv(1024)
        if not chunk:
            break
        received += chunk
    assert received == expected


def test_partial_input_is_buffered(server, peer):
    pump(server, lambda: len(server.clients) == 1)
    assert len(server.clients) == 1
    (client,) = server.clients.values()
    peer.sendall(b"NICK bo")
    pump(server, lambda: client.msg == "NICK bo")
    assert client.msg == "NICK bo"
    peer.sendall(b"b\r\n")
    pump(server, lambda: client.msg == "")
    assert client.msg == ""


def test_input_is_truncated_at_nul(server, peer):
    pump(server, lambda: len(server.clients) == 1)
    assert len(server.clients) == 1
    (client,) = server.clients.values()
    peer.sendall(b"NI\0garbage")
    pump(server, lambda: client.msg == "NI")
    assert client.msg == "NI"


def test_execute_command_parses_and_resets(server):
    client = Client(msg=":nick!user@host PRIVMSG #chan :hi\r\n")
    message = server.execute_command(client)
    assert message.command == "PRIVMSG"
    assert message.nickname == "nick"
    assert message.username == "user"
    assert message.param(0) == "#chan"
    assert client.msg == ""


def test_execute_command_reports_parse_error(server, stream):
    client = Client(msg="123\r\n")
    assert server.execute_command(client) is None
    assert "error:" in stream.getvalue()
    assert client.msg == ""


def test_close_is_idempotent_and_drops_clients(server, peer):
    pump(server, lambda: len(server.clients) == 1)
    assert len(server.clients) == 1
    server.close()
    server.close()
    assert server.clients == {}