"""Load error taxonomy and the user-facing text for each kind."""

from __future__ import annotations

import enum


class LoadError(enum.Enum):
    """Closed set of fetch failures surfaced to the presentation layer."""

    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"


_TITLES_AND_MESSAGES: dict[LoadError, tuple[str, str]] = {
    LoadError.SERVER_ERROR: (
        "Server Error",
        "We could not process your request. Please try again.",
    ),
    LoadError.DECODING_ERROR: (
        "Network Error",
        "Ensure you are connected to the internet. Please try again.",
    ),
}


def title_and_message(error: LoadError) -> tuple[str, str]:
    """Return the alert ``(title, message)`` pair for *error*."""
    try:
        return _TITLES_AND_MESSAGES[error]
    except KeyError:
        raise ValueError(f"Unknown load error: {error!r}") from None
