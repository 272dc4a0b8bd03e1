"""Non-blocking IRC server built around a readiness selector."""

from __future__ import annotations

import contextlib
import re
import selectors
import socket

from .client import Client
from .diagnostics import Reporter
from .message import IRCMessage, MessageParseError

MAX_CLIENT = 128
RECV_SIZE = 255
WELCOME = "Welcome to Our IRC Chat, Please read the Documentation (RFC 2812)\n"

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_PORT_TEXT = re.compile(r"\s*([+-]?\d+)")


class ServerError(Exception):
    """Raised when the server cannot be set up or keep running."""


class PortConversionError(ServerError):
    """Raised when the port argument is not a valid number."""

    def __init__(self) -> None:
        super().__init__("Failed to convert the port")


def parse_port(text: str) -> int:
    """Convert ``text`` to a port number, accepting only a whole decimal integer."""
    if text == "":
        return 0
    match = _PORT_TEXT.fullmatch(text)
    if match is None:
        raise PortConversionError()
    value = int(match.group(1))
    if value >= _LONG_MAX or value <= _LONG_MIN:
        raise PortConversionError()
    return value


class Server:
    """Listens for IRC clients and parses the lines they send."""

    def __init__(
        self,
        port: str | int,
        password: str,
        *,
        host: str = "",
        reporter: Reporter | None = None,
    ) -> None:
        self.reporter = reporter if reporter is not None else Reporter()
        self.reporter.log("Server Created")
        self.port = parse_port(port) if isinstance(port, str) else port
        self.password = password
        self.channels: dict[str, list[Client]] = {}
        self.clients: dict[int, Client] = {}
        self.reporter.log("Port = %d | password = %s", self.port, self.password)

        try:
            self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise ServerError("socket failed") from exc
        self.reporter.ok("socket() OK")
        try:
            self._setup_socket(host)
        except BaseException:
            self._socket.close()
            raise

        self._selector = selectors.DefaultSelector()
        self._selector.register(self._socket, selectors.EVENT_READ)
        self._closed = False
        self.reporter.ok("Server initialisation OK")

    def _setup_socket(self, host: str) -> None:
        try:
            self._socket.bind((host, self.port & 0xFFFF))
        except (OSError, OverflowError) as exc:
            raise ServerError("bind failed") from exc
        self.reporter.ok("bind() OK")
        try:
            self._socket.setblocking(False)
        except OSError as exc:
            raise ServerError("fcntl failed") from exc
        self.reporter.ok("fcntl() OK")
        try:
            self._socket.listen(socket.SOMAXCONN)
        except OSError as exc:
            raise ServerError("listen failed") from exc
        self.reporter.ok("listen() OK")

    @property
    def address(self) -> tuple[str, int]:
        """The address the listening socket is bound to."""
        return self._socket.getsockname()

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def serve_forever(self) -> None:
        """Handle clients until interrupted."""
        try:
            while True:
                self.poll_once(0.1)
        except KeyboardInterrupt:
            raise ServerError("End of the server") from None

    def poll_once(self, timeout: float | None) -> None:
        """Wait up to ``timeout`` seconds and handle every ready socket."""
        for key, _ in self._selector.select(timeout):
            if key.fileobj is self._socket:
                self.add_client()
            else:
                self._receive(key.data)

    def add_client(self) -> Client:
        """Accept one pending connection and greet it."""
        try:
            connection, _ = self._socket.accept()
        except OSError as exc:
            raise ServerError("accept failed") from exc
        connection.setblocking(False)
        client = Client(connection=connection, fd=connection.fileno())
        self.clients[client.fd] = client
        self._selector.register(connection, selectors.EVENT_READ, client)
        self.reporter.ok("client %d connected", len(self.clients))
        with contextlib.suppress(OSError):
            connection.send(WELCOME.encode() + b"\0")
        return client

    def _receive(self, client: Client) -> None:
        try:
            data = client.connection.recv(RECV_SIZE)
        except (BlockingIOError, InterruptedError):
            return
        except OSError as exc:
            raise ServerError("recv failed") from exc
        if not data:
            self._drop(client)
            return
        text = data.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")
        client.feed(text)
        if client.has_line():
            self.execute_command(client)

    def _drop(self, client: Client) -> None:
        self._selector.unregister(client.connection)
        del self.clients[client.fd]
        client.connection.close()
        self.reporter.warn("client %i disconnected", client.fd)

    def execute_command(self, client: Client) -> IRCMessage | None:
        """Parse the client's pending input, report it and clear the buffer."""
        self.reporter.log("Msg in Execute: %s", client.msg)
        message: IRCMessage | None = None
        try:
            message = IRCMessage.parse(client.msg)
        except MessageParseError as exc:
            self.reporter.error("%s", exc)
        else:
            self._describe(message)
        client.reset()
        return message

    def _describe(self, message: IRCMessage) -> None:
        report = self.reporter.debug
        report("-- Checking Parsed message --")
        report("Command: %s", message.command)
        if message.prefix:
            report("Prefix: %s", message.prefix)
        if message.nickname:
            report("Nickname: %s", message.nickname)
        if message.username:
            report("Username: %s", message.username)
        if message.hostname:
            report("Hostname: %s", message.hostname)
        report("Params count: %d", len(message.params))
        for index, param in enumerate(message.params):
            report("Param[%d]: %s", index, param)

    def close(self) -> None:
        """Close the listening socket and every client connection."""
        if self._closed:
            return
        self._closed = True
        self.reporter.log("Server has been deleted")
        self.reporter.log("nb_client = %d", len(self.clients))
        for client in self.clients.values():
            client.connection.close()
        self.clients.clear()
        self._selector.close()
        self._socket.close()