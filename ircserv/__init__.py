"""A small IRC server that accepts clients and parses RFC 1459/2812 messages."""

__version__ = "0.1.0"
__all__ = ["cli", "client", "diagnostics", "message", "replies", "server"]