"""Configuration for curation providers."""

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar
from urllib.parse import urlparse

from pkgcurate.exceptions import ConfigurationError
from pkgcurate.logging_config import configure_logging

CLEARLYDEFINED_API_BASE = "https://api.clearlydefined.io"
DEFAULT_CONNECT_TIMEOUT = 10.0  # seconds
DEFAULT_READ_TIMEOUT = 30.0  # seconds - curation services can be slow
DEFAULT_MAX_WORKERS = 8

ENV_PREFIX = "CURATION_"

T = TypeVar("T")


@dataclass
class CurationProviderConfig:
    """Settings shared by the network-backed curation providers."""

    server_url: str = CLEARLYDEFINED_API_BASE
    cache_expiration_hours: int = 0
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    # Overall wall-clock budget for one get_curations_for() call, None for unbounded
    deadline: Optional[float] = None
    max_workers: int = DEFAULT_MAX_WORKERS
    # Attach stack traces to logged fetch failures
    print_stack_trace: bool = False
    # Emit JSON log lines instead of text
    structured_logging: bool = False

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self._validate_server_url()

        if self.cache_expiration_hours < 0:
            raise ConfigurationError("Cache expiration hours must not be negative")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ConfigurationError("Connect and read timeouts must be positive")
        if self.deadline is not None and self.deadline <= 0:
            raise ConfigurationError("Deadline must be positive when set")
        if self.max_workers < 1:
            raise ConfigurationError("At least one worker is required")

    def _validate_server_url(self) -> None:
        """
        Validate and normalize the server URL.

        Raises:
            ConfigurationError: If the URL is not an absolute http(s) URL
        """
        url = self.server_url.strip().rstrip("/")
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            raise ConfigurationError(f"Server URL must use http or https: '{self.server_url}'")
        if not parsed.netloc:
            raise ConfigurationError(f"Server URL must include a hostname: '{self.server_url}'")
        self.server_url = url


def evaluate_boolean(value: str) -> bool:
    """Evaluate a string as a boolean value."""
    return value.strip().lower() in ("true", "yes", "yeah", "1")


def _env(name: str, convert: Callable[[str], T], default: T) -> T:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid value for {ENV_PREFIX}{name}: '{raw}'")


def load_config() -> CurationProviderConfig:
    """
    Load provider configuration from CURATION_* environment variables.

    Returns:
        Validated CurationProviderConfig

    Raises:
        ConfigurationError: If a value cannot be parsed or is invalid
    """
    config = CurationProviderConfig(
        server_url=_env("SERVER_URL", str, CLEARLYDEFINED_API_BASE),
        cache_expiration_hours=_env("CACHE_EXPIRATION_HOURS", int, 0),
        connect_timeout=_env("CONNECT_TIMEOUT", float, DEFAULT_CONNECT_TIMEOUT),
        read_timeout=_env("READ_TIMEOUT", float, DEFAULT_READ_TIMEOUT),
        deadline=_env("DEADLINE", float, None),
        max_workers=_env("MAX_WORKERS", int, DEFAULT_MAX_WORKERS),
        print_stack_trace=_env("PRINT_STACK_TRACE", evaluate_boolean, False),
        structured_logging=_env("STRUCTURED_LOGGING", evaluate_boolean, False),
    )
    config.validate()
    configure_logging(structured=config.structured_logging)
    return config
