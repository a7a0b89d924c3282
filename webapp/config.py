from __future__ import annotations

import os
import re
from dataclasses import dataclass, field


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_STATIC_DIR = "web/static"
DEFAULT_LOG_LEVEL = "info"

# Optional sign and ASCII digits only, within a signed 64-bit range.
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class Config:
    """Runtime settings, loaded once at startup and never mutated."""

    server: ServerConfig = field(default_factory=ServerConfig)
    static_dir: str = DEFAULT_STATIC_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def address(self) -> str:
        return f"{self.server.host}:{self.server.port}"


def get_env_str(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None:
        return default
    return value


def get_env_int(key: str, default: int) -> int:
    """Read ``key`` as an integer; unset or unparsable values give ``default``."""
    value = os.environ.get(key)
    if value is None:
        return default
    if not INT_PATTERN.fullmatch(value):
        return default
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        return default
    return number


def load() -> Config:
    return Config(
        server=ServerConfig(
            host=get_env_str("APP_HOST", DEFAULT_HOST),
            port=get_env_int("APP_PORT", DEFAULT_PORT),
        ),
        static_dir=get_env_str("APP_STATIC_DIR", DEFAULT_STATIC_DIR),
        log_level=get_env_str("APP_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
