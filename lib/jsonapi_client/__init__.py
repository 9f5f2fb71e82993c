__version__ = "0.1.0"

from .client import JSONAPIClient
from .config_types import DEFAULT_PORT, ClientConfig
from .errors import ArityMismatchError, ConfigError, DecodeError, JSONAPIClientError, TransportError

__all__ = [
    "JSONAPIClient",
    "ClientConfig",
    "DEFAULT_PORT",
    "JSONAPIClientError",
    "ConfigError",
    "ArityMismatchError",
    "TransportError",
    "DecodeError",
]
