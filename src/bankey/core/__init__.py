"""Shared infrastructure — configuration, exceptions, logging and the join barrier."""

from .config import Config, get_config, reset_config
from .exceptions import (
    AuthenticationError,
    BankeyError,
    ConfigurationError,
    DecodingError,
    FetchError,
    ServerError,
)

__all__ = [
    "AuthenticationError",
    "BankeyError",
    "Config",
    "ConfigurationError",
    "DecodingError",
    "FetchError",
    "ServerError",
    "get_config",
    "reset_config",
]
