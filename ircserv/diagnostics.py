"""Coloured diagnostic output for the server."""

from __future__ import annotations

import sys
from typing import TextIO

BOLD_ON = "\033[1m"
BOLD_OFF = "\033[22m"
RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
GRAY = "\033[90m"


class Reporter:
    """Writes tagged, coloured lines; only errors are shown unless verbose."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self.stream = stream

    def _emit(self, color: str, tag: str, msg: str, args: tuple) -> None:
        text = msg % args if args else msg
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f"{BOLD_ON}{color}{tag:>8}{RESET}{BOLD_OFF} > {text}\n")

    def debug(self, msg: str, *args) -> None:
        if self.verbose:
            self._emit(BLUE, "debug:", msg, args)

    def log(self, msg: str, *args) -> None:
        if self.verbose:
            self._emit(CYAN, "log:", msg, args)

    def warn(self, msg: str, *args) -> None:
        if self.verbose:
            self._emit(YELLOW, "warning:", msg, args)

    def ok(self, msg: str, *args) -> None:
        if self.verbose:
            self._emit(GREEN, "done:", msg, args)

    def error(self, msg: str, *args) -> None:
        self._emit(RED, "error:", msg, args)