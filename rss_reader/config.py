"""Runtime configuration taken from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .feeds import CONNECT_TIMEOUT, READ_TIMEOUT

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "RSS_READER_LOG_LEVEL"
ENV_LOG_FILE = "RSS_READER_LOG_FILE"
ENV_CONNECT_TIMEOUT = "RSS_READER_CONNECT_TIMEOUT"
ENV_READ_TIMEOUT = "RSS_READER_READ_TIMEOUT"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class HttpConfig:
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT

    @property
    def timeout(self) -> Tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    http: HttpConfig = field(default_factory=HttpConfig)


def _parse_timeout(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def parse_env_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the application config from ``RSS_READER_*`` variables."""
    env = os.environ if environ is None else environ
    config = AppConfig()

    level = env.get(ENV_LOG_LEVEL)
    if level:
        config.logging.level = level.strip()
    log_file = env.get(ENV_LOG_FILE)
    if log_file:
        config.logging.file = log_file.strip()

    connect = env.get(ENV_CONNECT_TIMEOUT)
    if connect:
        config.http.connect_timeout = _parse_timeout(ENV_CONNECT_TIMEOUT, connect)
    read = env.get(ENV_READ_TIMEOUT)
    if read:
        config.http.read_timeout = _parse_timeout(ENV_READ_TIMEOUT, read)

    return config
