"""Login credential check."""

from .login import BLANK_CREDENTIALS, INCORRECT_CREDENTIALS, authenticate

__all__ = ["BLANK_CREDENTIALS", "INCORRECT_CREDENTIALS", "authenticate"]
