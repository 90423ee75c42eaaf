"""
Service protocols.

Any backend (HTTP client, local fixtures, test fake) implements these so
the summary loader can treat them uniformly. Failures are signalled by
raising :class:`~bankey.core.exceptions.FetchError` subclasses
(``ServerError`` / ``DecodingError``).
"""

from typing import Protocol, runtime_checkable

from bankey.financial.models import Account, Profile


@runtime_checkable
class ProfileService(Protocol):
    """Fetches the profile for a user id."""

    async def fetch_profile(self, user_id: str) -> Profile:
        ...


@runtime_checkable
class AccountService(Protocol):
    """Fetches the accounts held under a user id."""

    async def fetch_accounts(self, user_id: str) -> list[Account]:
        ...
