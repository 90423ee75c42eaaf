"""Shared test fixtures for bankey."""

import asyncio
import os
import tempfile
from decimal import Decimal

import pytest

from bankey.core.exceptions import FetchError
from bankey.financial.models import Account, AccountType, Profile


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file with zero network delay."""
    import yaml

    config_data = {
        "paths": {"data_dir": os.path.join(tmp_dir, "data")},
        "summary": {"greeting": "Good morning", "user_ids": ["1"]},
        "network": {"profile_delay": 0, "accounts_delay": 0},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def profile():
    return Profile(user_id="1", first_name="Kevin", last_name="Flynn")


@pytest.fixture
def accounts():
    return [
        Account(id="1", type=AccountType.BANKING, name="Basic Savings", amount=Decimal("929466.23")),
        Account(id="2", type=AccountType.CREDIT_CARD, name="Visa Avion Card", amount=Decimal("412.83")),
        Account(id="3", type=AccountType.INVESTMENT, name="Tax-Free Saver", amount=Decimal("2000.00")),
    ]


class GatedService:
    """Fake profile/account service whose fetches finish only when released.

    ``release(value)`` completes the pending fetch with *value*;
    ``release(error=FetchError(...))`` fails it instead.
    """

    def __init__(self):
        self.calls: list[str] = []
        self.started = asyncio.Event()
        self._gate = asyncio.Event()
        self._value = None
        self._error: FetchError | None = None
        self.finished = False

    def release(self, value=None, *, error: FetchError | None = None) -> None:
        self._value = value
        self._error = error
        self._gate.set()

    async def _fetch(self, user_id: str):
        self.calls.append(user_id)
        self.started.set()
        await self._gate.wait()
        self.finished = True
        if self._error is not None:
            raise self._error
        return self._value

    async def fetch_profile(self, user_id: str) -> Profile:
        return await self._fetch(user_id)

    async def fetch_accounts(self, user_id: str) -> list[Account]:
        return await self._fetch(user_id)


@pytest.fixture
def gated_profiles():
    return GatedService()


@pytest.fixture
def gated_accounts():
    return GatedService()
