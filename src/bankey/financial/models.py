"""Core banking data models.

Immutable snapshots of what the backend returns for a user: the profile
and the list of accounts held under that user id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum


class AccountType(Enum):
    """Kinds of account shown on the summary screen.

    Values match the ``type`` strings in backend payloads.
    """

    BANKING = "Banking"
    CREDIT_CARD = "CreditCard"
    INVESTMENT = "Investment"


@dataclass(frozen=True)
class Profile:
    """Account holder.

    Attributes:
        user_id: Backend identifier.
        first_name: Shown in the summary greeting.
        last_name: Family name.
    """

    user_id: str
    first_name: str
    last_name: str

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("Profile user_id cannot be empty")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Account:
    """A single account belonging to one profile.

    Attributes:
        id: Backend identifier.
        type: Banking, credit card or investment.
        name: Human-readable name, e.g. "Basic Savings".
        amount: Current balance (exact decimal).
        created_at: When the account was opened (optional).
    """

    id: str
    type: AccountType
    name: str
    amount: Decimal
    created_at: datetime | None = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.type, AccountType):
            object.__setattr__(self, "type", AccountType(self.type))
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation as e:
                raise ValueError(f"Account {self.name} has invalid amount: {self.amount!r}") from e
        if not self.amount.is_finite():
            raise ValueError(f"Account {self.name} has non-finite amount: {self.amount}")

    @classmethod
    def make_placeholder(cls) -> Account:
        """Skeleton row shown while a load is outstanding."""
        return cls(id="", type=AccountType.BANKING, name="Account name", amount=Decimal("0"))
