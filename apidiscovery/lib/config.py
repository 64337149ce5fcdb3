"""
Centralized library configuration.

This module defines immutable configuration settings for the discovery
client and its HTTP transport. Values are sourced from environment variables
(after loading a local `.env` file with `python-dotenv`), with defaults that
point at the public Google API discovery service.

Side effect: importing this module calls `load_env_file()`, which copies
variables from the nearest `.env` file into `os.environ`. Variables already
set in the process environment are never replaced.

The `Settings` dataclass is instantiated once at import time as `settings`.
`Settings.from_env()` builds a fresh instance for callers (and tests) that
change the environment after import.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .enums.message import FailMessage
from .errors.app_error import ConfigError

__version__ = "0.1.0"

DEFAULT_DISCOVERY_BASE_URL = "https://www.googleapis.com/discovery/v1/"
"""Root of the public discovery endpoint. Always ends with a slash."""

DEFAULT_HTTP_TIMEOUT = 30.0
"""Seconds allowed for a single request issued by the transport."""


def load_env_file(path: str | os.PathLike | None = None) -> bool:
    """
    Load a `.env` file into `os.environ` without overriding existing values.

    Args:
        path: File to read. Defaults to the nearest `.env` found by
            `python-dotenv`.

    Returns:
        True if at least one variable was read.
    """
    return load_dotenv(dotenv_path=path, override=False)


load_env_file()


def _timeout_from_env() -> float:
    raw = os.getenv("DISCOVERY_HTTP_TIMEOUT")
    if raw is None or raw == "":
        return DEFAULT_HTTP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(
            FailMessage.INVALID_TIMEOUT, context={"value": raw}
        ) from None
    if value <= 0:
        raise ConfigError(FailMessage.INVALID_TIMEOUT, context={"value": raw})
    return value


@dataclass(frozen=True)
class Settings:
    """
    Immutable container for configuration values.

    Attributes:
        discovery_base_url: Default base URL used by `DiscoveryClient` when
            none is passed to its constructor.
        http_timeout: Per-request timeout, in seconds, applied by `HttpAuth`.
        user_agent: `User-Agent` header sent with every request.
    """

    discovery_base_url: str = field(
        default_factory=lambda: os.getenv(
            "DISCOVERY_BASE_URL", DEFAULT_DISCOVERY_BASE_URL
        )
    )
    """Base URL of the discovery endpoint."""

    http_timeout: float = field(default_factory=_timeout_from_env)
    """Transport timeout in seconds."""

    user_agent: str = field(
        default_factory=lambda: os.getenv(
            "DISCOVERY_USER_AGENT", f"apidiscovery/{__version__}"
        )
    )
    """User agent reported to the endpoint."""

    @classmethod
    def from_env(cls) -> "Settings":
        """Re-read the environment and return a new `Settings`."""
        return cls()


# Singleton-style settings instance used throughout the library.
settings = Settings()
