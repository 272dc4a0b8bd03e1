"""State kept for one connected IRC client."""

from __future__ import annotations

import socket
from dataclasses import dataclass, field

LINE_BREAKS = "\r\n"


@dataclass(eq=False)
class Client:
    """A connected peer: its socket, identity and unprocessed input."""

    connection: socket.socket | None = field(default=None, repr=False)
    fd: int = -1
    msg: str = ""
    nickname: str = ""
    username: str = ""
    is_empty: bool = True

    def feed(self, data: str) -> None:
        """Append received text to the pending input buffer."""
        self.msg += data

    def has_line(self) -> bool:
        """Whether the pending input holds a line break."""
        return any(char in self.msg for char in LINE_BREAKS)

    def reset(self) -> None:
        """Drop the pending input."""
        self.msg = ""