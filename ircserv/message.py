"""Parsing of IRC protocol messages (RFC 1459 / RFC 2812 layout)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

PREFIX_MARKER = ":"
TRAILING_MARKER = ":"
MAX_MIDDLE_PARAMS = 14

_COMMAND = re.compile(r" *([A-Za-z]+)")
_SEPARATOR = re.compile(r"[\r\n: ]")
_CONTENT = re.compile(r"[^\r\n ]")


class MessageParseError(ValueError):
    """Raised when a raw line cannot be parsed as an IRC message."""

    def __init__(self, raw_message: str) -> None:
        super().__init__(f"Failed to parse IRC message: {raw_message!r}")
        self.raw_message = raw_message


@dataclass
class IRCMessage:
    """A parsed IRC message: optional prefix, command and parameters."""

    prefix: str = ""
    command: str = ""
    params: list[str] = field(default_factory=list)
    raw_message: str = ""
    has_trailing: bool = False

    @classmethod
    def parse(cls, raw_message: str) -> IRCMessage:
        """Parse ``raw_message``; raise :class:`MessageParseError` on failure."""
        if not raw_message:
            raise MessageParseError(raw_message)

        prefix = ""
        pos = 0
        if raw_message.startswith(PREFIX_MARKER):
            prefix_end = raw_message.find(" ", 1)
            if prefix_end in (-1, 1):
                raise MessageParseError(raw_message)
            prefix = raw_message[1:prefix_end]
            pos = prefix_end

        match = _COMMAND.match(raw_message, pos)
        if match is None:
            raise MessageParseError(raw_message)
        command = match.group(1)
        cursor: int | None = match.end() if match.end() < len(raw_message) else None

        params: list[str] = []
        has_trailing = False
        while cursor is not None and len(params) < MAX_MIDDLE_PARAMS:
            separator = _SEPARATOR.search(raw_message, cursor)
            end = separator.start() if separator else len(raw_message)
            if end > cursor:
                params.append(raw_message[cursor:end])
            content = _CONTENT.search(raw_message, end)
            cursor = content.start() if content else None
            if cursor is not None and raw_message[cursor] == TRAILING_MARKER:
                params.append(raw_message[cursor + 1:])
                has_trailing = True
                break
        else:
            if cursor is not None:
                raise MessageParseError(raw_message)

        return cls(
            prefix=prefix,
            command=command,
            params=params,
            raw_message=raw_message,
            has_trailing=has_trailing,
        )

    @property
    def nickname(self) -> str:
        """Nickname part of the prefix (before ``!`` or ``@``)."""
        if not self.prefix:
            return ""
        pos = self.prefix.find("!")
        if pos == -1:
            pos = self.prefix.find("@")
            if pos == -1:
                return self.prefix
        return self.prefix[:pos]

    @property
    def username(self) -> str:
        """Username part of the prefix (between ``!`` and ``@``)."""
        if not self.prefix:
            return ""
        excl = self.prefix.find("!")
        if excl == -1:
            return ""
        at = self.prefix.find("@", excl)
        if at == -1:
            return self.prefix[excl + 1:]
        return self.prefix[excl + 1:at]

    @property
    def hostname(self) -> str:
        """Hostname part of the prefix (after ``@``)."""
        if not self.prefix:
            return ""
        at = self.prefix.find("@")
        return "" if at == -1 else self.prefix[at + 1:]

    def param(self, index: int) -> str:
        """Return the parameter at ``index``, or an empty string if absent."""
        if 0 <= index < len(self.params):
            return self.params[index]
        return ""