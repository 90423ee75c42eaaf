"""Tests for bankey.financial.models."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from bankey.financial.models import Account, AccountType, Profile


class TestProfile:
    def test_create(self):
        profile = Profile(user_id="1", first_name="Kevin", last_name="Flynn")
        assert profile.full_name == "Kevin Flynn"

    def test_empty_user_id_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Profile(user_id="", first_name="Kevin", last_name="Flynn")

    def test_immutable(self):
        profile = Profile(user_id="1", first_name="Kevin", last_name="Flynn")
        with pytest.raises(FrozenInstanceError):
            profile.first_name = "Sam"


class TestAccount:
    def test_auto_convert_to_decimal(self):
        account = Account(id="1", type=AccountType.BANKING, name="Basic Savings", amount=929466.23)
        assert isinstance(account.amount, Decimal)
        assert account.amount == Decimal("929466.23")

    def test_type_from_wire_string(self):
        account = Account(id="3", type="CreditCard", name="Visa", amount="412.83")
        assert account.type is AccountType.CREDIT_CARD

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            Account(id="1", type="Mortgage", name="Home", amount=1)

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), "-Infinity"])
    def test_non_finite_amount_raises(self, amount):
        with pytest.raises(ValueError, match="non-finite"):
            Account(id="1", type=AccountType.BANKING, name="Broken", amount=amount)

    def test_invalid_amount_raises(self):
        with pytest.raises(ValueError, match="invalid amount"):
            Account(id="1", type=AccountType.BANKING, name="Broken", amount="lots")

    def test_placeholder(self):
        placeholder = Account.make_placeholder()
        assert placeholder.type is AccountType.BANKING
        assert placeholder.name == "Account name"
        assert placeholder.amount == Decimal("0")
