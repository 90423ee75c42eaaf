"""Demo login — a single hardcoded credential pair, taken from config."""

from __future__ import annotations

from loguru import logger

from bankey.core.exceptions import AuthenticationError

BLANK_CREDENTIALS = "Username / password can not be blank"
INCORRECT_CREDENTIALS = "Incorrect username / password"


def authenticate(
    username: str | None,
    password: str | None,
    *,
    expected_username: str = "Kevin",
    expected_password: str = "Welcome",
) -> None:
    """Accept or reject a login attempt.

    Raises:
        AuthenticationError: with the message to show under the sign-in button.
    """
    if not username or not password:
        raise AuthenticationError(BLANK_CREDENTIALS)

    if username != expected_username or password != expected_password:
        logger.warning(f"Rejected login for {username!r}")
        raise AuthenticationError(INCORRECT_CREDENTIALS)

    logger.info(f"User {username!r} logged in")
