from __future__ import annotations
from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_PORT = 20059


@dataclass(frozen=True)
class ClientConfig:
    host: str
    port: int
    username: str
    password: str
    salt: str
    timeout_s: float | None = 15.0

    def __post_init__(self) -> None:
        for name in ("host", "username", "password", "salt"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise ConfigError(f"port must be an integer in 1..65535, got {self.port!r}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ConfigError("timeout_s must be positive")
