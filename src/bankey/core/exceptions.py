"""
Bankey exception hierarchy.

All bankey exceptions inherit from BankeyError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bankey.summary.errors import LoadError


class BankeyError(Exception):
    """Base exception class for all bankey errors."""


class ConfigurationError(BankeyError):
    """Raised for configuration errors (missing keys, invalid values)."""


class AuthenticationError(BankeyError):
    """Raised when a login attempt is rejected."""


class FetchError(BankeyError):
    """Raised by a service when a fetch fails.

    Carries the :class:`~bankey.summary.errors.LoadError` kind the loader
    reports to the presentation layer.
    """

    def __init__(self, kind: LoadError, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(detail or kind.value)


class ServerError(FetchError):
    """Backend or transport failure."""

    def __init__(self, detail: str = ""):
        from bankey.summary.errors import LoadError

        super().__init__(LoadError.SERVER_ERROR, detail)


class DecodingError(FetchError):
    """Response payload could not be decoded."""

    def __init__(self, detail: str = ""):
        from bankey.summary.errors import LoadError

        super().__init__(LoadError.DECODING_ERROR, detail)
