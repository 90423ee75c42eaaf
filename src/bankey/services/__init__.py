"""Profile and account services — the loader's external collaborators."""

from .base import AccountService, ProfileService
from .simulated import SimulatedAccountService, SimulatedProfileService, decode_accounts, decode_profile

__all__ = [
    "AccountService",
    "ProfileService",
    "SimulatedAccountService",
    "SimulatedProfileService",
    "decode_accounts",
    "decode_profile",
]
