"""Command-line entry point: ``ircserv <port> <password>``."""

from __future__ import annotations

import os
import sys

from .diagnostics import Reporter
from .server import Server, ServerError


def main(argv: list[str] | None = None) -> int:
    """Run the server on the given port with the given password."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        sys.stderr.write("Error: IRC: Not enought argument\n")
        return 1
    reporter = Reporter(verbose=os.environ.get("IRCSERV_VERBOSE") == "1")
    port, password = args
    try:
        with Server(port, password, reporter=reporter) as server:
            server.serve_forever()
    except ServerError as exc:
        reporter.error("%s", exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())