"""Banking domain models and currency formatting."""

from .currency import CurrencyFormatter
from .models import Account, AccountType, Profile

__all__ = [
    "Account",
    "AccountType",
    "CurrencyFormatter",
    "Profile",
]
