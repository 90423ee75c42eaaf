"""Tests for bankey.services.simulated."""

from decimal import Decimal

import pytest

from bankey.core.exceptions import DecodingError, ServerError
from bankey.financial.models import AccountType
from bankey.services.base import AccountService, ProfileService
from bankey.services.simulated import (
    SimulatedAccountService,
    SimulatedProfileService,
    decode_accounts,
    decode_profile,
)
from bankey.summary.errors import LoadError


class TestDecodeProfile:
    def test_decode(self):
        profile = decode_profile('{"id": "1", "first_name": "Kevin", "last_name": "Flynn"}')
        assert profile.user_id == "1"
        assert profile.first_name == "Kevin"

    def test_numeric_id_is_stringified(self):
        profile = decode_profile(b'{"id": 2, "first_name": "Alan", "last_name": "Bradley"}')
        assert profile.user_id == "2"

    def test_malformed_json(self):
        with pytest.raises(DecodingError, match="Malformed JSON"):
            decode_profile("{not json")

    def test_missing_field(self):
        with pytest.raises(DecodingError, match="Invalid profile"):
            decode_profile('{"id": "1", "first_name": "Kevin"}')

    def test_wrong_shape(self):
        with pytest.raises(DecodingError):
            decode_profile("[1, 2, 3]")


class TestDecodeAccounts:
    def test_decode_preserves_order(self):
        payload = """[
            {"id": "1", "type": "Banking", "name": "Basic Savings", "amount": 929466.23,
             "created_at": "2010-06-21T15:29:32Z"},
            {"id": "2", "type": "Investment", "name": "Growth Fund", "amount": 15000}
        ]"""
        accounts = decode_accounts(payload)
        assert [a.name for a in accounts] == ["Basic Savings", "Growth Fund"]
        assert accounts[0].amount == Decimal("929466.23")
        assert accounts[0].created_at.year == 2010
        assert accounts[1].type is AccountType.INVESTMENT
        assert accounts[1].created_at is None

    def test_empty_list(self):
        assert decode_accounts("[]") == []

    def test_not_a_list(self):
        with pytest.raises(DecodingError, match="must be a list"):
            decode_accounts('{"id": "1"}')

    def test_unknown_account_type(self):
        with pytest.raises(DecodingError):
            decode_accounts('[{"id": "1", "type": "Mortgage", "name": "Home", "amount": 1}]')

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_amount(self, amount):
        with pytest.raises(DecodingError, match="non-finite"):
            decode_accounts('[{"id": "1", "type": "Banking", "name": "X", "amount": ' + amount + '}]')

    def test_numeric_timestamp(self):
        with pytest.raises(DecodingError, match="created_at"):
            decode_accounts('[{"id": "1", "type": "Banking", "name": "X", "amount": 1, "created_at": 5}]')

    def test_null_timestamp_is_allowed(self):
        accounts = decode_accounts('[{"id": "1", "type": "Banking", "name": "X", "amount": 1, "created_at": null}]')
        assert accounts[0].created_at is None

    def test_bad_timestamp(self):
        with pytest.raises(DecodingError):
            decode_accounts('[{"id": "1", "type": "Banking", "name": "X", "amount": 1, "created_at": "yesterday"}]')


class TestSimulatedServices:
    def test_satisfy_protocols(self):
        assert isinstance(SimulatedProfileService(), ProfileService)
        assert isinstance(SimulatedAccountService(), AccountService)

    async def test_fetch_bundled_profile(self):
        profile = await SimulatedProfileService().fetch_profile("1")
        assert profile.first_name == "Kevin"
        assert profile.last_name == "Flynn"

    async def test_fetch_bundled_accounts(self):
        accounts = await SimulatedAccountService().fetch_accounts("1")
        assert len(accounts) == 6
        assert accounts[0].name == "Basic Savings"
        assert accounts[0].amount == Decimal("929466.23")

    @pytest.mark.parametrize("user_id", ["1", "2", "3"])
    async def test_every_bundled_user_decodes(self, user_id):
        await SimulatedProfileService().fetch_profile(user_id)
        assert await SimulatedAccountService().fetch_accounts(user_id)

    async def test_unknown_user_is_server_error(self):
        with pytest.raises(ServerError):
            await SimulatedProfileService().fetch_profile("999")
        with pytest.raises(ServerError):
            await SimulatedAccountService().fetch_accounts("999")

    async def test_malformed_payload_is_decoding_error(self):
        service = SimulatedAccountService(payloads={"1": "[{"})
        with pytest.raises(DecodingError):
            await service.fetch_accounts("1")

    async def test_forced_failures(self):
        with pytest.raises(ServerError):
            await SimulatedProfileService(fail_with=LoadError.SERVER_ERROR).fetch_profile("1")
        with pytest.raises(DecodingError):
            await SimulatedAccountService(fail_with=LoadError.DECODING_ERROR).fetch_accounts("1")
