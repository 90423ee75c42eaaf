"""Display-ready projections of the summary data.

View models are rebuilt from scratch on every load cycle and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bankey.financial.currency import CurrencyFormatter
from bankey.financial.models import Account, AccountType, Profile


@dataclass(frozen=True)
class HeaderViewModel:
    """Greeting block above the account list."""

    welcome_message: str
    name: str
    date: datetime

    @property
    def date_formatted(self) -> str:
        return self.date.strftime("%a, %b %d, %Y")


@dataclass(frozen=True)
class AccountSummaryViewModel:
    """One row of the account list."""

    account_type: AccountType
    account_name: str
    balance: Decimal
    balance_display: str

    @classmethod
    def from_account(cls, account: Account, formatter: CurrencyFormatter) -> AccountSummaryViewModel:
        return cls(
            account_type=account.type,
            account_name=account.name,
            balance=account.amount,
            balance_display=formatter.dollars_formatted(account.amount),
        )


@dataclass(frozen=True)
class SummaryBundle:
    """Everything the summary screen needs after a successful load."""

    profile: Profile
    header: HeaderViewModel
    accounts: tuple[AccountSummaryViewModel, ...]


def build_account_view_models(
    accounts: list[Account] | tuple[Account, ...], formatter: CurrencyFormatter
) -> tuple[AccountSummaryViewModel, ...]:
    """Map accounts 1:1 into row view models, preserving order."""
    return tuple(AccountSummaryViewModel.from_account(account, formatter) for account in accounts)
