"""Simulated backend — canned JSON payloads served after a fake network delay.

Payloads go through the same decoding path a real HTTP client would use,
so malformed data surfaces as ``DecodingError`` and unknown users as
``ServerError``.
"""

from __future__ import annotations

import asyncio
import json
from datetime import datetime
from typing import Any

from loguru import logger

from bankey.core.exceptions import DecodingError, ServerError
from bankey.financial.models import Account, AccountType, Profile
from bankey.summary.errors import LoadError

from . import fixtures


def _raise_forced(kind: LoadError, what: str, user_id: str) -> None:
    detail = f"simulated {kind.value} fetching {what} for user {user_id}"
    if kind is LoadError.SERVER_ERROR:
        raise ServerError(detail)
    raise DecodingError(detail)


def _parse_json(payload: str | bytes) -> Any:
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodingError(f"Malformed JSON: {e}") from e


def _parse_timestamp(raw: object) -> datetime | None:
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        raise ValueError(f"created_at must be a string, got {raw!r}")
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))


def decode_profile(payload: str | bytes) -> Profile:
    """Decode a ``{"id", "first_name", "last_name"}`` payload."""
    data = _parse_json(payload)
    try:
        return Profile(
            user_id=str(data["id"]),
            first_name=data["first_name"],
            last_name=data["last_name"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodingError(f"Invalid profile payload: {e}") from e


def decode_accounts(payload: str | bytes) -> list[Account]:
    """Decode a JSON list of account objects, preserving order."""
    data = _parse_json(payload)
    if not isinstance(data, list):
        raise DecodingError("Accounts payload must be a list")
    try:
        return [
            Account(
                id=str(item["id"]),
                type=AccountType(item["type"]),
                name=item["name"],
                amount=item["amount"],
                created_at=_parse_timestamp(item.get("created_at")),
            )
            for item in data
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise DecodingError(f"Invalid accounts payload: {e}") from e


class SimulatedProfileService:
    """Profile service backed by :data:`fixtures.PROFILES`.

    Args:
        delay: Simulated latency in seconds.
        payloads: Raw JSON per user id (defaults to the bundled fixtures).
        fail_with: Force every fetch to fail with this kind.
    """

    def __init__(
        self,
        delay: float = 0.0,
        payloads: dict[str, str] | None = None,
        fail_with: LoadError | None = None,
    ):
        self.delay = delay
        self.payloads = fixtures.PROFILES if payloads is None else payloads
        self.fail_with = fail_with

    async def fetch_profile(self, user_id: str) -> Profile:
        logger.debug(f"Fetching profile for user {user_id}")
        await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            _raise_forced(self.fail_with, "profile", user_id)
        payload = self.payloads.get(user_id)
        if payload is None:
            raise ServerError(f"No profile for user {user_id}")
        return decode_profile(payload)


class SimulatedAccountService:
    """Account service backed by :data:`fixtures.ACCOUNTS`.

    Args:
        delay: Simulated latency in seconds.
        payloads: Raw JSON per user id (defaults to the bundled fixtures).
        fail_with: Force every fetch to fail with this kind.
    """

    def __init__(
        self,
        delay: float = 0.0,
        payloads: dict[str, str] | None = None,
        fail_with: LoadError | None = None,
    ):
        self.delay = delay
        self.payloads = fixtures.ACCOUNTS if payloads is None else payloads
        self.fail_with = fail_with

    async def fetch_accounts(self, user_id: str) -> list[Account]:
        logger.debug(f"Fetching accounts for user {user_id}")
        await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            _raise_forced(self.fail_with, "accounts", user_id)
        payload = self.payloads.get(user_id)
        if payload is None:
            raise ServerError(f"No accounts for user {user_id}")
        return decode_accounts(payload)
