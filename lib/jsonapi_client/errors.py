from __future__ import annotations


class JSONAPIClientError(Exception):
    """Base client error."""


class ConfigError(JSONAPIClientError):
    """Invalid or empty client configuration value."""


class ArityMismatchError(JSONAPIClientError):
    def __init__(self, methods_count: int, args_count: int, message: str | None = None):
        super().__init__(
            message
            or f"got {methods_count} method(s) but {args_count} argument list(s); "
               "each method needs its own argument list"
        )
        self.methods_count = methods_count
        self.args_count = args_count


class TransportError(JSONAPIClientError):
    """Transport/network layer error."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class DecodeError(JSONAPIClientError):
    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body[:1000] if body else body
